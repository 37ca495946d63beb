from singleactivity.extensions import db
from .base import BaseModel

class ModuleType(BaseModel):
    __tablename__ = "module_types"

    name = db.Column(db.String(50), unique=True, nullable=False, index=True)
    fullname = db.Column(db.String(255), nullable=False)
    enabled = db.Column(db.Boolean, nullable=False, default=True)

    # Presentational types (label) have no page of their own
    has_view = db.Column(db.Boolean, nullable=False, default=True)
    extends_navigation = db.Column(db.Boolean, nullable=False, default=False)
