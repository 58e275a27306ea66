import logging

import numpy as np

from i18n import get_translation
from models import FinancialStats

logger = logging.getLogger(__name__)

EXPENSE_CATEGORIES = ['Housing', 'Food', 'Transport', 'Education', 'Entertainment', 'Other']

HIGH_DEBT_RATIO = 1.0
MODERATE_DEBT_RATIO = 0.5


# Dashboard statistics
def compute_stats(students):
    if not students:
        return FinancialStats(
            total_students=0,
            average_salary=0.0,
            total_loans=0.0,
            average_loan=0.0,
            debt_to_income_ratio=0.0
        )
    salaries = np.array([s.monthly_salary for s in students], dtype=float)
    loans = np.array([s.total_loan for s in students], dtype=float)
    annual_income = salaries.sum() * 12
    return FinancialStats(
        total_students=len(students),
        average_salary=round(float(np.mean(salaries)), 2),
        total_loans=round(float(loans.sum()), 2),
        average_loan=round(float(np.mean(loans)), 2),
        debt_to_income_ratio=round(float(loans.sum() / annual_income), 2) if annual_income > 0 else 0.0
    )


def debt_to_income(student):
    annual_salary = student.monthly_salary * 12
    if annual_salary <= 0:
        return None
    return student.total_loan / annual_salary


# Loan simulator math
def daily_interest(balance, annual_rate):
    return round(balance * annual_rate / 100 / 365, 2)


def monthly_payment(principal, annual_rate, years):
    """Standard amortized payment: P * r / (1 - (1 + r) ** -n).

    ``annual_rate`` is a percentage; zero rate spreads the principal evenly.
    """
    months = int(round(years * 12))
    if principal <= 0 or months <= 0:
        return 0.0
    if annual_rate <= 0:
        return round(principal / months, 2)
    r = annual_rate / 12 / 100
    return round(principal * r / (1 - (1 + r) ** -months), 2)


def total_interest(principal, annual_rate, years):
    months = int(round(years * 12))
    if principal <= 0 or months <= 0:
        return 0.0
    return round(max(monthly_payment(principal, annual_rate, years) * months - principal, 0.0), 2)


def simulate_student(student, annual_rate, years):
    payment = monthly_payment(student.total_loan, annual_rate, years)
    share = round(payment / student.monthly_salary * 100, 1) if student.monthly_salary > 0 else None
    return {
        'student': student,
        'daily_interest': daily_interest(student.total_loan, annual_rate),
        'monthly_payment': payment,
        'total_interest': total_interest(student.total_loan, annual_rate, years),
        'salary_share': share
    }


def simulate(students, annual_rate, years):
    return [simulate_student(s, annual_rate, years) for s in students]


# Budget planner summary
def goal_progress(goal):
    if goal.target_amount <= 0:
        return 100.0
    return round(min(goal.current_amount / goal.target_amount * 100, 100.0), 1)


def summarize_budget(expenses, goals):
    by_category = {}
    for expense in expenses:
        by_category[expense.category] = by_category.get(expense.category, 0) + expense.amount
    return {
        'total_expenses': round(sum(e.amount for e in expenses), 2),
        'by_category': by_category,
        'goals': [{'goal': g, 'progress': goal_progress(g)} for g in goals],
        'total_saved': round(sum(g.current_amount for g in goals), 2)
    }


# Advisor insights
def generate_advice(students, language='English'):
    advice = []
    for student in students:
        ratio = debt_to_income(student)
        try:
            if ratio is None:
                text = get_translation('adviceNoSalary', language).format(name=student.name)
                level = 'warning'
            elif ratio > HIGH_DEBT_RATIO:
                text = get_translation('adviceHigh', language).format(name=student.name, ratio=ratio)
                level = 'warning'
            elif ratio > MODERATE_DEBT_RATIO:
                text = get_translation('adviceModerate', language).format(name=student.name, ratio=ratio)
                level = 'info'
            else:
                text = get_translation('adviceLow', language).format(name=student.name, ratio=ratio)
                level = 'success'
        except (KeyError, IndexError, ValueError) as e:
            logger.error(f"Error formatting advice for student {student.id}: {e}")
            continue
        advice.append({'student': student, 'ratio': ratio, 'text': text, 'level': level})
    return advice
