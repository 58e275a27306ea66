"""
Application state for EduFinance Tracker.

``AppState`` is an immutable snapshot of everything the pages render. The
``Orchestrator`` is the single writer: every operation builds a new snapshot
with ``dataclasses.replace`` and hands it to the subscribed listeners, which
is how a mutation "re-renders" (the web layer stores the snapshot and the
next request renders it in full).
"""
import logging
import uuid
from dataclasses import dataclass, replace
from typing import Callable, List, Tuple

from models import (
    Badge,
    Expense,
    INITIAL_NOTIFICATIONS,
    INITIAL_STUDENTS,
    LanguageCode,
    Notification,
    SavingsGoal,
    Student,
    ViewState,
)

logger = logging.getLogger(__name__)

DEFAULT_INTEREST_RATE = 5.5
DEFAULT_LOAN_TERM_YEARS = 10


@dataclass(frozen=True)
class AppState:
    is_authenticated: bool = False
    view: ViewState = ViewState.DASHBOARD
    students: Tuple[Student, ...] = INITIAL_STUDENTS
    expenses: Tuple[Expense, ...] = ()
    goals: Tuple[SavingsGoal, ...] = ()
    badges: Tuple[Badge, ...] = ()
    notifications: Tuple[Notification, ...] = INITIAL_NOTIFICATIONS
    show_notifications: bool = False
    language: LanguageCode = LanguageCode.ENGLISH
    interest_rate: float = DEFAULT_INTEREST_RATE
    loan_term_years: float = DEFAULT_LOAN_TERM_YEARS

    @property
    def is_rtl(self):
        return self.language == LanguageCode.ARABIC

    @property
    def text_direction(self):
        return 'rtl' if self.is_rtl else 'ltr'

    @property
    def has_unread_notifications(self):
        return any(not n.read for n in self.notifications)

    @property
    def earned_badge_ids(self):
        return {badge.id for badge in self.badges}


def badge_notification(badge):
    return Notification(
        id=str(uuid.uuid4()),
        title='New Badge Unlocked!',
        message=f"You earned the {badge.name} badge!",
        translation_key_title='badgeUnlocked',
        translation_key_message='badgeEarned',
        translation_params={'badgeName': badge.name},
        type='success',
        read=False,
        time='Just now'
    )


class Orchestrator:
    """Owns the current snapshot and funnels every mutation through ``_commit``.

    Operations never fail and never validate: unknown identities on update
    or delete leave the collection as it was, and numeric fields are stored
    exactly as given.
    """

    def __init__(self, state=None):
        self._state = state if state is not None else AppState()
        self._listeners: List[Callable[[AppState], None]] = []

    @property
    def state(self):
        return self._state

    def subscribe(self, listener):
        self._listeners.append(listener)

    def _commit(self, **changes):
        self._state = replace(self._state, **changes)
        for listener in self._listeners:
            listener(self._state)
        return self._state

    # Session
    def login(self):
        if not self._state.is_authenticated:
            logger.info("User logged in")
        return self._commit(is_authenticated=True)

    def set_view(self, view):
        return self._commit(view=view)

    # Students
    def add_student(self, student):
        return self._commit(students=self._state.students + (student,))

    def update_student(self, updated):
        students = tuple(updated if s.id == updated.id else s for s in self._state.students)
        return self._commit(students=students)

    def delete_student(self, student_id):
        students = tuple(s for s in self._state.students if s.id != student_id)
        return self._commit(students=students)

    # Budget
    def add_expense(self, expense):
        return self._commit(expenses=self._state.expenses + (expense,))

    def add_goal(self, goal):
        return self._commit(goals=self._state.goals + (goal,))

    # Education
    def earn_badge(self, badge):
        # newest notification first
        return self._commit(
            badges=self._state.badges + (badge,),
            notifications=(badge_notification(badge),) + self._state.notifications
        )

    # Notifications
    def toggle_notification_panel(self):
        return self._commit(show_notifications=not self._state.show_notifications)

    def mark_all_notifications_read(self):
        notifications = tuple(replace(n, read=True) for n in self._state.notifications)
        return self._commit(notifications=notifications)

    # Shared scalars
    def set_language(self, language):
        logger.info(f"Language set to {language.value}")
        return self._commit(language=language)

    def set_interest_rate(self, value):
        return self._commit(interest_rate=value)

    def set_loan_term_years(self, value):
        return self._commit(loan_term_years=value)
