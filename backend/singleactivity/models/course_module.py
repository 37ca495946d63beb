from singleactivity.extensions import db
from singleactivity.domain.capabilities import VIEW_HIDDEN_ACTIVITIES
from .base import BaseModel

class CourseModule(BaseModel):
    __tablename__ = "course_modules"

    course_id = db.Column(db.String(36), db.ForeignKey("courses.id"), nullable=False, index=True)
    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False)
    module = db.Column(db.String(50), db.ForeignKey("module_types.name"), nullable=False)  # forum, quiz, label
    name = db.Column(db.String(255), nullable=False)
    visible = db.Column(db.Boolean, nullable=False, default=True)
    # Visibility to restore once the module leaves a hidden section
    visible_old = db.Column(db.Boolean, nullable=False, default=True)
    order = db.Column(db.Integer, nullable=False, default=0)

    section = db.relationship("Section", back_populates="modules")
    module_type = db.relationship("ModuleType")

    __table_args__ = (
        db.Index("idx_module_section_order", "section_id", "order"),
    )

    @property
    def sectionnum(self) -> int:
        return self.section.section

    def is_visible_to(self, capabilities) -> bool:
        """
        Whether a user holding ``capabilities`` can see this module.
        """
        if self.visible and self.section.visible:
            return True
        return VIEW_HIDDEN_ACTIVITIES in capabilities
