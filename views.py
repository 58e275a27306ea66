"""
View routing: the six mutually exclusive panels, their navigation entries
and the slice of state each panel is handed.
"""
from collections import namedtuple

from education import LESSONS
from finance import compute_stats, generate_advice, simulate, summarize_budget
from i18n import get_translation
from models import ViewState

Panel = namedtuple('Panel', ['view', 'label_key', 'icon', 'accent', 'template', 'callbacks'])

# Navigation order
PANELS = (
    Panel(ViewState.DASHBOARD, 'dashboard', 'layout-dashboard', 'blue', 'panels/dashboard.html', ()),
    Panel(ViewState.MANAGE, 'loans', 'users', 'blue', 'panels/manage.html',
          ('add_student', 'update_student', 'delete_student')),
    Panel(ViewState.BUDGET, 'budget', 'target', 'orange', 'panels/budget.html', ('add_expense', 'add_goal')),
    Panel(ViewState.DAILY, 'dailyAnalysis', 'calculator', 'green', 'panels/daily.html',
          ('set_interest_rate', 'set_loan_term_years')),
    Panel(ViewState.LEARN, 'learn', 'trophy', 'yellow', 'panels/learn.html', ('earn_badge',)),
    Panel(ViewState.INSIGHTS, 'aiAdvisor', 'sparkles', 'purple', 'panels/insights.html', ()),
)

_PANELS_BY_VIEW = {panel.view: panel for panel in PANELS}


def parse_view(name):
    try:
        return ViewState(str(name).upper())
    except ValueError:
        return None


def get_panel(view):
    return _PANELS_BY_VIEW[view]


def panel_template(view):
    return get_panel(view).template


def nav_items(active, language='English'):
    return [
        {
            'view': panel.view.value.lower(),
            'label': get_translation(panel.label_key, language),
            'icon': panel.icon,
            'accent': panel.accent,
            'active': panel.view == active
        }
        for panel in PANELS
    ]


def panel_context(state):
    """Read-only data and permitted callbacks for the active panel only."""
    view = state.view
    language = state.language
    if view == ViewState.DASHBOARD:
        data = {'students': state.students, 'stats': compute_stats(state.students)}
    elif view == ViewState.MANAGE:
        data = {'students': state.students}
    elif view == ViewState.BUDGET:
        data = {
            'expenses': state.expenses,
            'goals': state.goals,
            'summary': summarize_budget(state.expenses, state.goals)
        }
    elif view == ViewState.DAILY:
        data = {
            'students': state.students,
            'interest_rate': state.interest_rate,
            'loan_term_years': state.loan_term_years,
            'simulation': simulate(state.students, state.interest_rate, state.loan_term_years)
        }
    elif view == ViewState.LEARN:
        earned = state.earned_badge_ids
        data = {
            'badges': state.badges,
            'lessons': [{'lesson': lesson, 'earned': lesson.badge.id in earned} for lesson in LESSONS]
        }
    else:
        data = {'students': state.students, 'advice': generate_advice(state.students, language)}
    data['callbacks'] = get_panel(view).callbacks
    return data
