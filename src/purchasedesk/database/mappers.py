"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the domain entities stay free of
column details such as the flattened file metadata.
"""

from typing import Optional

from purchasedesk.domain import entities as domain
from purchasedesk.database.models import (
    Bill as ORMBill,
    Customer as ORMCustomer,
    Project as ORMProject,
    PurchaseOrder as ORMPurchaseOrder,
    Supplier as ORMSupplier,
)


def _file_ref(name: Optional[str], content_type: Optional[str], size: Optional[int]) -> Optional[domain.FileRef]:
    if name is None:
        return None
    return domain.FileRef(name=name, content_type=content_type, size=size)


def customer_to_domain(orm_customer: ORMCustomer) -> domain.Customer:
    """Convert SQLAlchemy Customer model to domain Customer entity."""
    return domain.Customer(id=orm_customer.id, name=orm_customer.name)


def customer_to_orm(customer: domain.Customer) -> ORMCustomer:
    return ORMCustomer(id=customer.id, name=customer.name)


def project_to_domain(orm_project: ORMProject) -> domain.Project:
    """Convert SQLAlchemy Project model to domain Project entity."""
    return domain.Project(
        id=orm_project.id,
        customer_id=orm_project.customer_id,
        cup_code=orm_project.cup_code,
    )


def project_to_orm(project: domain.Project) -> ORMProject:
    return ORMProject(id=project.id, customer_id=project.customer_id, cup_code=project.cup_code)


def supplier_to_domain(orm_supplier: ORMSupplier) -> domain.Supplier:
    """Convert SQLAlchemy Supplier model to domain Supplier entity."""
    return domain.Supplier(
        id=orm_supplier.id,
        name=orm_supplier.name,
        vat_number=orm_supplier.vat_number,
    )


def supplier_to_orm(supplier: domain.Supplier) -> ORMSupplier:
    return ORMSupplier(id=supplier.id, name=supplier.name, vat_number=supplier.vat_number)


def purchase_order_to_domain(orm_po: ORMPurchaseOrder) -> domain.PurchaseOrder:
    """Convert SQLAlchemy PurchaseOrder model to domain PurchaseOrder entity."""
    return domain.PurchaseOrder(
        id=orm_po.id,
        name=orm_po.name,
        supplier_id=orm_po.supplier_id,
        status=domain.PurchaseOrderStatus(orm_po.status),
        cig_code=orm_po.cig_code,
        project_id=orm_po.project_id,
        signed_file=_file_ref(orm_po.signed_file_name, orm_po.signed_file_type, orm_po.signed_file_size),
        explanation=orm_po.explanation,
        created_by=orm_po.created_by,
        created_date=orm_po.created_date,
        submitted_date=orm_po.submitted_date,
        approved_by=orm_po.approved_by,
        approved_date=orm_po.approved_date,
        rejected_by=orm_po.rejected_by,
        rejected_date=orm_po.rejected_date,
        assigned_date=orm_po.assigned_date,
        closed_date=orm_po.closed_date,
    )


def purchase_order_to_orm(po: domain.PurchaseOrder) -> ORMPurchaseOrder:
    """Convert domain PurchaseOrder entity to a detached SQLAlchemy model."""
    signed = po.signed_file
    return ORMPurchaseOrder(
        id=po.id,
        name=po.name,
        supplier_id=po.supplier_id,
        status=domain.PurchaseOrderStatus(po.status).value,
        cig_code=po.cig_code,
        project_id=po.project_id,
        signed_file_name=signed.name if signed else None,
        signed_file_type=signed.content_type if signed else None,
        signed_file_size=signed.size if signed else None,
        explanation=po.explanation,
        created_by=po.created_by,
        created_date=po.created_date,
        submitted_date=po.submitted_date,
        approved_by=po.approved_by,
        approved_date=po.approved_date,
        rejected_by=po.rejected_by,
        rejected_date=po.rejected_date,
        assigned_date=po.assigned_date,
        closed_date=po.closed_date,
    )


def bill_to_domain(orm_bill: ORMBill) -> domain.Bill:
    """Convert SQLAlchemy Bill model to domain Bill entity."""
    return domain.Bill(
        id=orm_bill.id,
        purchase_order_id=orm_bill.purchase_order_id,
        file_name=orm_bill.file_name,
        xml_file=domain.FileRef(
            name=orm_bill.xml_file_name,
            content_type=orm_bill.xml_file_type,
            size=orm_bill.xml_file_size,
        ),
        upload_date=orm_bill.upload_date,
        status=domain.BillStatus(orm_bill.status),
        amount=orm_bill.amount,
        bill_number=orm_bill.bill_number,
        approval_date=orm_bill.approval_date,
        payment_date=orm_bill.payment_date,
        approved_by=orm_bill.approved_by,
        paid_by=orm_bill.paid_by,
    )


def bill_to_orm(bill: domain.Bill) -> ORMBill:
    """Convert domain Bill entity to a detached SQLAlchemy model."""
    return ORMBill(
        id=bill.id,
        purchase_order_id=bill.purchase_order_id,
        file_name=bill.file_name,
        xml_file_name=bill.xml_file.name,
        xml_file_type=bill.xml_file.content_type,
        xml_file_size=bill.xml_file.size,
        status=domain.BillStatus(bill.status).value,
        upload_date=bill.upload_date,
        amount=bill.amount,
        bill_number=bill.bill_number,
        approval_date=bill.approval_date,
        payment_date=bill.payment_date,
        approved_by=bill.approved_by,
        paid_by=bill.paid_by,
    )
