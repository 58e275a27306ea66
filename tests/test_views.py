import pytest

from education import LESSONS, award, check_answer, get_lesson
from models import LanguageCode, ViewState
from state import Orchestrator
from views import PANELS, nav_items, panel_context, panel_template, parse_view


def test_there_are_six_views_in_navigation_order():
    assert [panel.view for panel in PANELS] == [
        ViewState.DASHBOARD, ViewState.MANAGE, ViewState.BUDGET,
        ViewState.DAILY, ViewState.LEARN, ViewState.INSIGHTS
    ]


@pytest.mark.parametrize('name, expected', [
    ('dashboard', ViewState.DASHBOARD),
    ('Manage', ViewState.MANAGE),
    ('INSIGHTS', ViewState.INSIGHTS),
    ('settings', None),
    ('', None),
])
def test_parse_view(name, expected):
    assert parse_view(name) == expected


def test_exactly_one_nav_item_is_active():
    for view in ViewState:
        items = nav_items(view)
        active = [item for item in items if item['active']]
        assert len(active) == 1
        assert active[0]['view'] == view.value.lower()


def test_nav_labels_follow_language():
    labels = [item['label'] for item in nav_items(ViewState.DASHBOARD, LanguageCode.SPANISH)]
    assert labels[0] == 'Panel'


def test_each_view_has_its_own_template():
    templates = {panel_template(view) for view in ViewState}
    assert len(templates) == 6


def test_manage_panel_gets_student_callbacks():
    state = Orchestrator().set_view(ViewState.MANAGE)
    context = panel_context(state)
    assert context['callbacks'] == ('add_student', 'update_student', 'delete_student')
    assert context['students'] == state.students
    assert 'expenses' not in context


def test_dashboard_panel_is_read_only():
    context = panel_context(Orchestrator().state)
    assert context['callbacks'] == ()
    assert context['stats'].total_students == 2


def test_daily_panel_receives_shared_scalars():
    orchestrator = Orchestrator()
    orchestrator.set_interest_rate(7.0)
    state = orchestrator.set_view(ViewState.DAILY)
    context = panel_context(state)
    assert context['interest_rate'] == 7.0
    assert context['loan_term_years'] == 10
    assert len(context['simulation']) == 2


def test_learn_panel_marks_earned_lessons():
    orchestrator = Orchestrator()
    orchestrator.earn_badge(award(LESSONS[0]))
    context = panel_context(orchestrator.set_view(ViewState.LEARN))
    assert [item['earned'] for item in context['lessons']] == [True, False, False]
    assert context['callbacks'] == ('earn_badge',)


def test_insights_panel_has_advice_per_student():
    context = panel_context(Orchestrator().set_view(ViewState.INSIGHTS))
    assert len(context['advice']) == 2


def test_lessons_and_answers():
    lesson = get_lesson('budget')
    assert check_answer(lesson, 'c')
    assert not check_answer(lesson, 'a')
    assert get_lesson('missing') is None


def test_awarded_badge_is_unlocked_copy():
    badge = award(LESSONS[0])
    assert badge.unlocked
    assert not LESSONS[0].badge.unlocked
    assert badge.id == LESSONS[0].badge.id
