# roster/model/schema.py
#
# Employee roster seed data.
#
# This file provides:
# - the fixed validation lists (employees, departments)
# - the ordered seed assignments for the in-memory table
# - console texts shared by the loop and the topics
#
# NOTE:
# Seed assignments are applied in order and bypass validation. "Zara" is not
# a valid employee but is seeded anyway; keep it, queries depend on it.

# -----------------------------
# Validation lists
# -----------------------------

VALID_EMPLOYEES = (
    "Sally",
    "Bob",
    "Amir",
    "Sales",
    "Aaron",
)

VALID_DEPARTMENTS = (
    "Sales",
    "Engineering",
    "HR",
    "Cybersecurity",
)


# -----------------------------
# Seed assignments (name, dept)
# -----------------------------
# Later pairs overwrite earlier ones: Sally ends up in Sales.

SEED_ASSIGNMENTS = (
    ("Sally", "Engineering"),
    ("Bob", "Engineering"),
    ("Zara", "Sales"),
    ("Aaron", "Sales"),
    ("Sally", "Sales"),
    ("Amir", "Sales"),
)


# -----------------------------
# Console texts
# -----------------------------

BANNER = "\n*** Employee Management ***"

MENU_LINES = (
    "\n1. Add a person to a department",
    "2. List people in a department",
    "3. Show all people in the company",
    "4. Exit the application",
    "Enter 1 - 4",
)

COMMAND_PROMPT = "Enter a command:"
DEPARTMENT_PROMPT = "Enter a department: "
QUIT_TEXT = "Quit"


def seed_table(pairs=SEED_ASSIGNMENTS) -> dict:
    """Build the assignment table from ordered (name, dept) pairs."""
    table = {}
    for name, dept in pairs:
        table[name] = dept
    return table
