from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class ViewState(Enum):
    DASHBOARD = 'DASHBOARD'
    MANAGE = 'MANAGE'
    BUDGET = 'BUDGET'
    DAILY = 'DAILY'
    LEARN = 'LEARN'
    INSIGHTS = 'INSIGHTS'


class LanguageCode(Enum):
    ENGLISH = 'English'
    MANDARIN_CHINESE = 'Mandarin Chinese'
    HINDI = 'Hindi'
    SPANISH = 'Spanish'
    ARABIC = 'Arabic'
    FRENCH = 'French'
    BENGALI = 'Bengali'
    PORTUGUESE = 'Portuguese'
    RUSSIAN = 'Russian'
    INDONESIAN = 'Indonesian'
    AZERBAIJANI = 'Azerbaijani'
    TURKISH = 'Turkish'

    @classmethod
    def parse(cls, value):
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Student:
    id: str
    name: str
    major: str
    monthly_salary: float  # per month, >= 0 expected
    total_loan: float


@dataclass(frozen=True)
class Expense:
    id: str
    category: str
    name: str
    amount: float


@dataclass(frozen=True)
class SavingsGoal:
    id: str
    title: str
    target_amount: float
    current_amount: float  # may exceed target_amount
    color: str


@dataclass(frozen=True)
class Badge:
    id: str
    name: str
    icon: str
    description: str
    unlocked: bool = False


@dataclass(frozen=True)
class Notification:
    id: str
    title: str
    message: str
    type: str = 'info'
    read: bool = False
    time: str = ''
    translation_key_title: Optional[str] = None
    translation_key_message: Optional[str] = None
    translation_params: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class FinancialStats:
    total_students: int
    average_salary: float
    total_loans: float
    average_loan: float
    debt_to_income_ratio: float


# Sample data
INITIAL_STUDENTS = (
    Student(id='1', name='Alice Johnson', major='Computer Science', monthly_salary=4500, total_loan=25000),
    Student(id='2', name='Bob Smith', major='Philosophy', monthly_salary=2800, total_loan=45000),
)

INITIAL_NOTIFICATIONS = (
    Notification(
        id='1',
        title='Welcome!',
        message='Start tracking your loans today.',
        translation_key_title='welcomeTitle',
        translation_key_message='welcomeMsg',
        type='info',
        read=False,
        time='Now'
    ),
    Notification(
        id='2',
        title='Tip',
        message='Check the Daily Simulator to save money.',
        translation_key_title='tipTitle',
        translation_key_message='tipMsg',
        type='success',
        read=False,
        time='1h ago'
    ),
)
