import pytest

from models import Badge, Expense, LanguageCode, SavingsGoal, Student, ViewState
from state import AppState, Orchestrator


def make_student(student_id, name='Carl', salary=3000, loan=10000):
    return Student(id=student_id, name=name, major='Art', monthly_salary=salary, total_loan=loan)


SAVER = Badge(id='saver', name='Saver', icon='piggy-bank', description='Saved money', unlocked=True)


def test_initial_state_has_seed_data():
    state = AppState()
    assert [s.id for s in state.students] == ['1', '2']
    assert [n.id for n in state.notifications] == ['1', '2']
    assert state.view == ViewState.DASHBOARD
    assert state.language == LanguageCode.ENGLISH
    assert state.interest_rate == 5.5
    assert state.loan_term_years == 10
    assert not state.is_authenticated
    assert not state.show_notifications
    assert state.expenses == state.goals == state.badges == ()


def test_add_student_appends_one_trailing_element(orchestrator):
    before = orchestrator.state.students
    carl = make_student('3')
    after = orchestrator.add_student(carl).students
    assert len(after) == len(before) + 1
    assert after[:-1] == before
    assert after[-1] == carl


def test_update_student_replaces_matching_element_in_place(orchestrator):
    before = orchestrator.state.students
    updated = Student(id='1', name='Alice J.', major='Math', monthly_salary=5000, total_loan=20000)
    after = orchestrator.update_student(updated).students
    assert len(after) == len(before)
    assert after[0] == updated
    assert after[1] == before[1]


def test_update_student_with_unknown_id_is_noop(orchestrator):
    before = orchestrator.state.students
    after = orchestrator.update_student(make_student('missing')).students
    assert after == before


def test_delete_student_with_unknown_id_is_noop(orchestrator):
    before = orchestrator.state.students
    assert orchestrator.delete_student('missing').students == before


def test_delete_student_removes_matching_element(orchestrator):
    after = orchestrator.delete_student('1').students
    assert [s.id for s in after] == ['2']


def test_add_then_delete_keeps_relative_order(orchestrator):
    orchestrator.add_student(make_student('3'))
    orchestrator.delete_student('1')
    assert [s.id for s in orchestrator.state.students] == ['2', '3']


def test_negative_values_are_stored_as_is(orchestrator):
    odd = make_student('4', salary=-100, loan=-5)
    assert orchestrator.add_student(odd).students[-1].monthly_salary == -100


def test_mutations_do_not_touch_previous_snapshots(orchestrator):
    original = orchestrator.state
    orchestrator.add_student(make_student('3'))
    orchestrator.mark_all_notifications_read()
    assert len(original.students) == 2
    assert all(not n.read for n in original.notifications)


def test_add_expense_and_goal_append(orchestrator):
    expense = Expense(id='e1', category='Food', name='Groceries', amount=120)
    goal = SavingsGoal(id='g1', title='Laptop', target_amount=1000, current_amount=1500, color='#3B82F6')
    orchestrator.add_expense(expense)
    orchestrator.add_goal(goal)
    assert orchestrator.state.expenses == (expense,)
    # over-target progress is kept as entered
    assert orchestrator.state.goals[0].current_amount == 1500


def test_earn_badge_prepends_success_notification(orchestrator):
    before = orchestrator.state
    after = orchestrator.earn_badge(SAVER)
    assert len(after.badges) == len(before.badges) + 1
    assert len(after.notifications) == len(before.notifications) + 1
    newest = after.notifications[0]
    assert newest.translation_key_title == 'badgeUnlocked'
    assert newest.translation_key_message == 'badgeEarned'
    assert newest.translation_params == {'badgeName': 'Saver'}
    assert newest.type == 'success'
    assert newest.read is False
    assert newest.time == 'Just now'
    assert newest.title == 'New Badge Unlocked!'
    assert newest.message == 'You earned the Saver badge!'
    assert after.notifications[1:] == before.notifications


def test_earn_badge_twice_is_not_deduplicated(orchestrator):
    orchestrator.earn_badge(SAVER)
    state = orchestrator.earn_badge(SAVER)
    assert [b.id for b in state.badges] == ['saver', 'saver']
    assert state.notifications[0].id != state.notifications[1].id


def test_mark_all_notifications_read_is_idempotent(orchestrator):
    orchestrator.earn_badge(SAVER)
    once = orchestrator.mark_all_notifications_read()
    twice = orchestrator.mark_all_notifications_read()
    assert all(n.read for n in once.notifications)
    assert once.notifications == twice.notifications


def test_toggle_notification_panel(orchestrator):
    assert orchestrator.toggle_notification_panel().show_notifications is True
    assert orchestrator.toggle_notification_panel().show_notifications is False


def test_has_unread_notifications(orchestrator):
    assert orchestrator.state.has_unread_notifications
    assert not orchestrator.mark_all_notifications_read().has_unread_notifications


@pytest.mark.parametrize('language', [code for code in LanguageCode if code != LanguageCode.ARABIC])
def test_only_arabic_is_right_to_left(orchestrator, language):
    assert orchestrator.set_language(LanguageCode.ARABIC).text_direction == 'rtl'
    state = orchestrator.set_language(language)
    assert state.text_direction == 'ltr'
    assert not state.is_rtl


def test_shared_scalars_are_replaced(orchestrator):
    orchestrator.set_interest_rate(6.8)
    orchestrator.set_loan_term_years(20)
    assert orchestrator.state.interest_rate == 6.8
    assert orchestrator.state.loan_term_years == 20


def test_login_is_one_way(orchestrator):
    assert orchestrator.login().is_authenticated
    assert orchestrator.login().is_authenticated


def test_set_view_reaches_any_view(orchestrator):
    for view in ViewState:
        assert orchestrator.set_view(view).view == view


def test_every_mutation_notifies_listeners():
    seen = []
    orchestrator = Orchestrator()
    orchestrator.subscribe(seen.append)
    orchestrator.add_student(make_student('3'))
    orchestrator.delete_student('missing')
    orchestrator.toggle_notification_panel()
    assert len(seen) == 3
    assert seen[-1] is orchestrator.state


def test_orchestrator_resumes_from_snapshot():
    snapshot = Orchestrator().add_student(make_student('3'))
    resumed = Orchestrator(snapshot)
    assert [s.id for s in resumed.state.students] == ['1', '2', '3']
