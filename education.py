from dataclasses import dataclass, replace
from typing import Tuple

from models import Badge


@dataclass(frozen=True)
class Lesson:
    id: str
    title_key: str
    body_key: str
    question_key: str
    choices: Tuple[Tuple[str, str], ...]  # (choice id, translation key)
    answer: str
    badge: Badge


LESSONS = (
    Lesson(
        id='interest',
        title_key='lessonInterestTitle',
        body_key='lessonInterestBody',
        question_key='lessonInterestQuestion',
        choices=(('a', 'lessonInterestA'), ('b', 'lessonInterestB'), ('c', 'lessonInterestC')),
        answer='a',
        badge=Badge(id='interest-master', name='Interest Master', icon='percent', description='Learned how interest grows on a loan.')
    ),
    Lesson(
        id='budget',
        title_key='lessonBudgetTitle',
        body_key='lessonBudgetBody',
        question_key='lessonBudgetQuestion',
        choices=(('a', 'lessonBudgetA'), ('b', 'lessonBudgetB'), ('c', 'lessonBudgetC')),
        answer='c',
        badge=Badge(id='budget-pro', name='Budget Pro', icon='pie-chart', description='Mastered the 50/30/20 budget rule.')
    ),
    Lesson(
        id='emergency',
        title_key='lessonEmergencyTitle',
        body_key='lessonEmergencyBody',
        question_key='lessonEmergencyQuestion',
        choices=(('a', 'lessonEmergencyA'), ('b', 'lessonEmergencyB'), ('c', 'lessonEmergencyC')),
        answer='b',
        badge=Badge(id='saver', name='Saver', icon='piggy-bank', description='Knows how big an emergency fund should be.')
    ),
)


def get_lesson(lesson_id):
    return next((lesson for lesson in LESSONS if lesson.id == lesson_id), None)


def check_answer(lesson, choice):
    return choice == lesson.answer


# The catalog keeps badges locked; an awarded copy is unlocked
def award(lesson):
    return replace(lesson.badge, unlocked=True)
