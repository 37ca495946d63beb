from singleactivity.extensions import db
from .base import BaseModel

class Course(BaseModel):
    __tablename__ = "courses"

    fullname = db.Column(db.String(255), nullable=False)
    shortname = db.Column(db.String(100), unique=True, nullable=False, index=True)
    format = db.Column(db.String(50), nullable=False, default="singleactivity")
    format_options = db.Column(db.JSON, default=dict)  # activitytype
    default_blocks = db.Column(db.JSON, default=dict)  # block region -> block names

    # Relationship to Sections (ordered by section number, cascade deletes)
    sections = db.relationship(
        "Section",
        back_populates="course",
        order_by="Section.section",
        cascade="all, delete-orphan"
    )
