# User-facing strings of the single activity course format

ACTIVITY_TYPE_LABEL = "Type of activity"
ACTIVITY_TYPE_HELP = "Choose the type of activity that this course is built around."

ERROR_ACTIVITY_TYPE = (
    "The activity type for this course is not set. "
    "Choose an activity type in the course settings."
)
ERROR_NOT_SETUP = "This course is not set up yet. Please contact the course administrator."
ACTIVITY_HIDDEN = "This activity is currently hidden."

ORPHANED = "Orphaned activities"
ORPHANED_WARNING = (
    "Orphaned activities are not displayed to students. "
    "They can only be accessed from this page and may be deleted or moved."
)
ORPHANED_ICON = "orphaned"
