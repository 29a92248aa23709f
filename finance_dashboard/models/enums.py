from enum import Enum

class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    LKR = "LKR"

class ExpenseCategory(str, Enum):
    food = "Food"
    rent = "Rent"
    utilities = "Utilities"
    transportation = "Transportation"
    entertainment = "Entertainment"
    shopping = "Shopping"
    health = "Health"
    education = "Education"
    other = "Other"
