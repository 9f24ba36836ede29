from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    UniqueConstraint,
)

metadata = MetaData()

applications = Table(
    "applications",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, nullable=False),
    Column("property_id", Integer, nullable=False),
    Column("state", String(20), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    # "{user_id}:{property_id}" mientras está PENDING, NULL en estados terminales
    Column("pending_key", String(64), nullable=True),
    UniqueConstraint("pending_key", name="uq_applications_pending_key"),
    Index("ix_applications_user_state", "user_id", "state"),
    Index("ix_applications_property", "property_id"),
)

lease_records = Table(
    "lease_records",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("application_id", Integer, nullable=False),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=True),
    Column("monthly_amount", Numeric(14, 2), nullable=False),
    Column("active", Boolean, nullable=False, default=True),
    # application_id mientras el registro está activo, NULL al cerrarlo
    Column("active_application_id", Integer, nullable=True),
    UniqueConstraint("active_application_id", name="uq_lease_records_active_application"),
    Index("ix_lease_records_application", "application_id"),
)
