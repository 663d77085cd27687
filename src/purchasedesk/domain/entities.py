"""Domain model entities for purchasedesk.

These are pure data classes representing business concepts, independent of
the store that holds them. Updates never mutate an entity in place; callers
build a new instance with ``dataclasses.replace``.
"""

import mimetypes
import os
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class PurchaseOrderStatus(str, Enum):
    """Purchase order workflow status."""

    DRAFT = "draft"
    WAITING_FOR_APPROVAL = "waiting_for_approval"
    IN_PROGRESS = "in_progress"
    ASSIGNED = "assigned"
    PAID = "paid"
    REJECTED = "rejected"
    CLOSED = "closed"


class BillStatus(str, Enum):
    """Bill workflow status."""

    NEEDS_APPROVAL = "needs_approval"
    APPROVED = "approved"
    PAID = "paid"
    REJECTED = "rejected"


class TimelineEventType(str, Enum):
    """Kinds of events shown on a purchase order timeline."""

    CREATED = "created"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"
    ASSIGNED = "assigned"
    CLOSED = "closed"
    BILL_UPLOADED = "bill_uploaded"
    BILL_APPROVED = "bill_approved"
    BILL_PAID = "bill_paid"


@dataclass(frozen=True)
class FileRef:
    """Metadata of a file held by reference. Content is never read."""

    name: str
    content_type: Optional[str] = None
    size: Optional[int] = None

    @classmethod
    def from_path(cls, path: str) -> "FileRef":
        """Build a file reference from a filesystem path.

        The MIME type is guessed from the file name.
        """
        name = os.path.basename(path)
        content_type, _ = mimetypes.guess_type(name)
        size = os.path.getsize(path) if os.path.exists(path) else None
        return cls(name=name, content_type=content_type, size=size)


@dataclass(frozen=True)
class Customer:
    """Customer domain entity."""

    id: str
    name: str


@dataclass(frozen=True)
class Project:
    """Project domain entity, optionally tied to a customer."""

    id: str
    customer_id: Optional[str] = None
    cup_code: Optional[str] = None


@dataclass(frozen=True)
class Supplier:
    """Supplier domain entity."""

    id: str
    name: str
    vat_number: str


@dataclass(frozen=True)
class PurchaseOrder:
    """Purchase order domain entity."""

    id: str
    name: str
    supplier_id: str
    status: PurchaseOrderStatus = PurchaseOrderStatus.DRAFT
    cig_code: Optional[str] = None
    project_id: Optional[str] = None
    signed_file: Optional[FileRef] = None
    explanation: Optional[str] = None
    created_by: Optional[str] = None
    created_date: Optional[datetime] = None
    submitted_date: Optional[datetime] = None
    approved_by: Optional[str] = None
    approved_date: Optional[datetime] = None
    rejected_by: Optional[str] = None
    rejected_date: Optional[datetime] = None
    assigned_date: Optional[datetime] = None
    closed_date: Optional[datetime] = None

    def __post_init__(self):
        # Raw status strings from loosely typed callers become the enum
        object.__setattr__(self, "status", PurchaseOrderStatus(self.status))


@dataclass(frozen=True)
class Bill:
    """Bill (invoice) domain entity attached to one purchase order."""

    id: str
    purchase_order_id: str
    file_name: str
    xml_file: FileRef
    upload_date: datetime
    status: BillStatus = BillStatus.NEEDS_APPROVAL
    amount: Optional[Decimal] = None
    bill_number: Optional[str] = None
    approval_date: Optional[datetime] = None
    payment_date: Optional[datetime] = None
    approved_by: Optional[str] = None
    paid_by: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "status", BillStatus(self.status))


@dataclass(frozen=True)
class TimelineEvent:
    """Derived timeline entry. Never stored."""

    id: str
    type: TimelineEventType
    description: str
    date: datetime
    user: Optional[str] = None
