"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

ADMIN_ROLE_NAME = "Administrador"
USER_ROLE_NAME = "Usuario"
SYSTEM_ACTOR = "Sistema"

# Display fallbacks for dangling references.
EMPLOYEE_PLACEHOLDER = "empleado"
SCHOOL_PLACEHOLDER = "colegio"
UNKNOWN_PLACEHOLDER = "Desconocido"

SESSION_SLOT_KEY = "currentUser"

MIN_ENTRY_HOURS = 0.5
MAX_ENTRY_HOURS = 24.0
ENTRY_HOURS_STEP = 0.5

MIN_USERNAME_LENGTH = 4

# Python weekday numbers (Monday == 0).
SUNDAY = 6
MONDAY = 0
DEFAULT_WEEK_START = SUNDAY
