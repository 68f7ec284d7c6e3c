"""Default configuration constants for the Course Attendance Calculator."""

# Band thresholds (percent)
GOOD_THRESHOLD = 75.0      # At or above = Good
MODERATE_THRESHOLD = 60.0  # At or above (and below Good) = Moderate

# Band labels
BAND_GOOD = "Good"
BAND_MODERATE = "Moderate"
BAND_LOW = "Low"

# Progress colors per band
BAND_COLORS = {
    BAND_GOOD: "#22C55E",
    BAND_MODERATE: "#EAB308",
    BAND_LOW: "#EF4444",
}

# Count fields a user can edit on a component
EDITABLE_FIELDS = ("attended", "total")

# Built-in component sets: (id, name, icon)
COMPONENT_SETS = {
    "standard": [
        ("lecture", "Lectures", "📖"),
        ("practical", "Practicals", "🧪"),
        ("skill", "Skills", "🧠"),
        ("tutorial", "Tutorials", "📘"),
    ],
    "no_tutorials": [
        ("lecture", "Lectures", "📖"),
        ("practical", "Practicals", "🧪"),
        ("skill", "Skills", "🧠"),
    ],
}
COMPONENT_SET_LABELS = {
    "standard": "Lectures, Practicals, Skills, Tutorials",
    "no_tutorials": "Lectures, Practicals, Skills",
    "custom": "Custom (imported)",
}
DEFAULT_COMPONENT_SET = "standard"

# Longest count a user can type into a field
COUNT_MAX_CHARS = 6
