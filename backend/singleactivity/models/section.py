from singleactivity.extensions import db
from .base import BaseModel

class Section(BaseModel):
    __tablename__ = "sections"

    course_id = db.Column(db.String(36), db.ForeignKey("courses.id"), nullable=False)
    section = db.Column(db.Integer, nullable=False)
    name = db.Column(db.String(255), nullable=True)
    visible = db.Column(db.Boolean, nullable=False, default=True)

    course = db.relationship("Course", back_populates="sections")
    modules = db.relationship(
        "CourseModule",
        back_populates="section",
        order_by="CourseModule.order"
    )

    __table_args__ = (
        db.UniqueConstraint("course_id", "section", name="uq_course_section_number"),
    )
