TAB_OPTIONS = [
    "Daily Planner",
    "Calendar",
    "Todos",
    "Passwords",
    "Goals",
    "Finance",
    "Health",
]

FIRST_SLOT_HOUR = 8
LAST_SLOT_HOUR = 18

DEFAULT_MEETING_COLOR = "#3B82F6"
DEFAULT_TODO_COLOR = "#7C3AED"
DEFAULT_ITEM_COLOR = "#6B7280"
DEFAULT_TODO_DURATION = 30

PRIORITIES = ["high", "medium", "low"]
PRIORITY_COLORS = {
    "high": "#EF4444",
    "medium": "#F59E0B",
    "low": "#10B981",
}
TYPE_COLORS = {
    "meeting": DEFAULT_MEETING_COLOR,
    "todo": DEFAULT_TODO_COLOR,
    "custom": DEFAULT_ITEM_COLOR,
}

ACCOUNT_TYPES = ["checking", "savings", "credit", "investment"]
TRANSACTION_TYPES = ["income", "expense", "transfer"]

HEALTH_DIMENSIONS = [
    ("spiritualScore", "Spiritual"),
    ("mentalScore", "Mental"),
    ("socialScore", "Social"),
    ("physicalScore", "Physical"),
    ("financialScore", "Financial"),
]
HEALTH_LABELS = [
    (9, "Excellent"),
    (7, "Good"),
    (5, "Fair"),
    (3, "Poor"),
]
LOWEST_HEALTH_LABEL = "Critical"

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

EXPENSE_CATEGORIES = [
    "Food & Dining",
    "Transportation",
    "Housing",
    "Utilities",
    "Entertainment",
    "Shopping",
    "Health & Medical",
    "Education",
    "Travel",
    "Other",
]
INCOME_CATEGORIES = ["Salary", "Freelance", "Business", "Investments", "Gifts", "Other"]

TREND_MONTHS = 6
