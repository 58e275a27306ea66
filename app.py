import os
import sys
import uuid
import logging
import tempfile
import threading
from datetime import timedelta
from functools import wraps
from flask import Flask, render_template, redirect, url_for, flash, session, abort, g
from flask_caching import Cache
import plotly.graph_objects as go
import plotly.io as pio
from models import LanguageCode, Student, Expense, SavingsGoal, ViewState
from state import AppState, Orchestrator
from i18n import get_translation, get_translated_text, translations_for, missing_keys
from views import nav_items, panel_context, panel_template, parse_view
from education import LESSONS, get_lesson, check_answer, award
from finance import summarize_budget
from forms import ActionForm, LanguageForm, StudentForm, ExpenseForm, GoalForm, SimulationForm, LessonForm

# Configure logging
logging.basicConfig(stream=sys.stdout, level=logging.INFO)
logger = logging.getLogger(__name__)

# Load environment variables
try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError as e:
    logger.error("Failed to load environment variables: %s", e)
    sys.exit(1)


def env_flag(name, default='true'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


# Initialize Flask app
app = Flask(__name__, template_folder='templates', static_folder='static')
app_secret_key = os.environ.get('FLASK_SECRET_KEY')
if not app_secret_key:
    logger.error("FLASK_SECRET_KEY environment variable not set")
    sys.exit(1)
app.secret_key = app_secret_key
app.config['SESSION_COOKIE_SECURE'] = env_flag('SESSION_COOKIE_SECURE')
app.config['SESSION_COOKIE_HTTPONLY'] = True
app.config['SESSION_COOKIE_SAMESITE'] = 'Lax'
app.config['PERMANENT_SESSION_LIFETIME'] = timedelta(days=1)
app.config['WTF_CSRF_ENABLED'] = env_flag('WTF_CSRF_ENABLED')
app.config['STATE_TIMEOUT'] = int(os.environ.get('STATE_TIMEOUT', 86400))
app.config['BACKGROUND_URL'] = os.environ.get(
    'BACKGROUND_URL',
    'https://images.unsplash.com/photo-1635324647369-42b6a5035229?q=80&w=2070&auto=format&fit=crop'
)

# Configure Flask-Caching
cache_config = {
    "CACHE_TYPE": "SimpleCache",
    "CACHE_DEFAULT_TIMEOUT": 300,
    "CACHE_THRESHOLD": int(os.environ.get('CACHE_THRESHOLD', 1000))
}
app.config.from_mapping(cache_config)
cache = Cache(app)

# Session state gets its own store. A threshold of 0 turns off pruning, so
# snapshots only leave when STATE_TIMEOUT expires.
state_dir = os.environ.get('STATE_DIR') or tempfile.mkdtemp(prefix='edufinance-state-')
state_store = Cache(app, with_jinja2_ext=False, config={
    "CACHE_TYPE": "FileSystemCache",
    "CACHE_DIR": state_dir,
    "CACHE_THRESHOLD": 0,
    "CACHE_DEFAULT_TIMEOUT": app.config['STATE_TIMEOUT']
})
logger.info(f"Session state stored in {state_dir}")

# Requests from one session are serialized so overlapping writes cannot drop a change
STATE_LOCKS = [threading.Lock() for _ in range(64)]

for missing_language, keys in missing_keys().items():
    logger.info(f"{missing_language}: {len(keys)} interface strings fall back to English")


# Per-session state store. Snapshots are immutable, so the store only ever
# holds whole states written by the orchestrator's listener.
def state_key(session_id):
    return f"state:{session_id}"


def state_lock(session_id):
    return STATE_LOCKS[hash(session_id) % len(STATE_LOCKS)]


def load_state(session_id):
    state = state_store.get(state_key(session_id))
    return state if state is not None else AppState()


def save_state(session_id, state):
    state_store.set(state_key(session_id), state, timeout=app.config['STATE_TIMEOUT'])


def get_orchestrator():
    if 'orchestrator' not in g:
        session_id = session.get('session_id')
        if not session_id:
            session_id = str(uuid.uuid4())
            session['session_id'] = session_id
            session.permanent = True
        lock = state_lock(session_id)
        lock.acquire()
        g.state_lock = lock
        orchestrator = Orchestrator(load_state(session_id))
        orchestrator.subscribe(lambda state: save_state(session_id, state))
        g.orchestrator = orchestrator
    return g.orchestrator


@app.teardown_request
def release_state_lock(exc):
    lock = g.pop('state_lock', None)
    if lock is not None:
        lock.release()


def current_language():
    orchestrator = g.get('orchestrator')
    if orchestrator is not None:
        return orchestrator.state.language.value
    session_id = session.get('session_id')
    return load_state(session_id).language.value if session_id else LanguageCode.ENGLISH.value


def login_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        orchestrator = get_orchestrator()
        if not orchestrator.state.is_authenticated:
            flash(get_translation('loginRequired', orchestrator.state.language), 'error')
            return redirect(url_for('index'))
        return view(*args, **kwargs)
    return wrapped


def flash_form_errors(form, language):
    flash(get_translation('formInvalid', language), 'error')
    for field in form:
        for error in field.errors:
            logger.warning(f"Rejected {form.__class__.__name__} input for {field.name}: {error}")
            flash(f"{field.label.text}: {error}", 'error')


# Generate loan vs salary chart
@cache.memoize(timeout=300)
def generate_loan_chart(rows, language='English'):
    try:
        if not rows:
            return get_translation('noStudents', language)
        names = [row[0] for row in rows]
        fig = go.Figure(data=[
            go.Bar(name=get_translation('annualSalary', language), x=names, y=[row[1] for row in rows], marker_color='#2E7D32'),
            go.Bar(name=get_translation('totalLoan', language), x=names, y=[row[2] for row in rows], marker_color='#D32F2F')
        ])
        fig.update_layout(
            title=get_translation('loanVsSalary', language),
            barmode='group',
            paper_bgcolor='rgba(0,0,0,0)',
            plot_bgcolor='rgba(0,0,0,0)',
            font=dict(size=12, color='#FFFFFF'),
            hovermode='closest'
        )
        return pio.to_html(fig, full_html=False, include_plotlyjs='cdn')
    except Exception as e:
        logger.error(f"Error generating loan chart: {e}")
        return get_translation('chartFailed', language)


# Generate expense charts
@cache.memoize(timeout=300)
def generate_expense_chart(by_category, language='English'):
    try:
        if not by_category:
            return get_translation('noExpenses', language)
        pie_fig = go.Figure(data=[go.Pie(
            labels=[get_translation(category, language) for category, _ in by_category],
            values=[abs(amount) for _, amount in by_category],
            hole=0.3,
            marker=dict(colors=['#2E7D32', '#DC3545', '#0288D1', '#FFB300', '#4CAF50', '#9C27B0'])
        )])
        pie_fig.update_layout(
            title=get_translation('expensesByCategory', language),
            showlegend=True,
            paper_bgcolor='rgba(0,0,0,0)',
            plot_bgcolor='rgba(0,0,0,0)',
            font=dict(size=12, color='#FFFFFF'),
            hovermode='closest'
        )
        return pio.to_html(pie_fig, full_html=False, include_plotlyjs='cdn')
    except Exception as e:
        logger.error(f"Error generating expense chart: {e}")
        return get_translation('chartFailed', language)


def page_context(state):
    language = state.language.value
    table = translations_for(language)
    return {
        't': lambda key: get_translation(key, language),
        'language': language,
        'languages': [code.value for code in LanguageCode],
        'direction': state.text_direction,
        'state': state,
        'nav': nav_items(state.view, language),
        'notifications': [
            {
                'notification': n,
                'title': get_translated_text(n, 'title', table),
                'message': get_translated_text(n, 'message', table)
            }
            for n in state.notifications
        ],
        'action_form': ActionForm(formdata=None),
        'language_form': LanguageForm(formdata=None, language=language),
        'background_url': app.config['BACKGROUND_URL']
    }


def panel_forms(state):
    language = state.language.value
    view = state.view
    if view == ViewState.DASHBOARD:
        rows = tuple((s.name, s.monthly_salary * 12, s.total_loan) for s in state.students)
        return {'chart_html': generate_loan_chart(rows, language)}
    if view == ViewState.MANAGE:
        return {
            'student_form': StudentForm(language, formdata=None),
            'edit_forms': {s.id: StudentForm(language, formdata=None, obj=s) for s in state.students}
        }
    if view == ViewState.BUDGET:
        by_category = summarize_budget(state.expenses, state.goals)['by_category']
        return {
            'expense_form': ExpenseForm(language, formdata=None),
            'goal_form': GoalForm(language, formdata=None),
            'chart_html': generate_expense_chart(tuple(by_category.items()), language)
        }
    if view == ViewState.DAILY:
        return {'simulation_form': SimulationForm(
            language,
            formdata=None,
            interest_rate=state.interest_rate,
            loan_term_years=state.loan_term_years
        )}
    if view == ViewState.LEARN:
        return {'lesson_forms': {
            lesson.id: LessonForm(lesson, language, formdata=None, prefix=lesson.id) for lesson in LESSONS
        }}
    return {}


# Routes
@app.route('/', methods=['GET'])
def root():
    return redirect(url_for('index'))


@app.route('/index')
def index():
    state = get_orchestrator().state
    if not state.is_authenticated:
        return render_template('login.html', **page_context(state))
    return render_template(
        'index.html',
        panel_template=panel_template(state.view),
        panel=panel_context(state),
        **panel_forms(state),
        **page_context(state)
    )


@app.route('/login', methods=['POST'])
def login():
    orchestrator = get_orchestrator()
    form = ActionForm()
    if form.validate_on_submit():
        orchestrator.login()
        flash(get_translation('loggedIn', orchestrator.state.language), 'success')
    else:
        flash_form_errors(form, orchestrator.state.language)
    return redirect(url_for('index'))


@app.route('/change_language', methods=['POST'])
def change_language():
    orchestrator = get_orchestrator()
    form = LanguageForm()
    language = LanguageCode.parse(form.language.data)
    if form.validate_on_submit() and language is not None:
        orchestrator.set_language(language)
        flash(get_translation('languageChanged', language), 'success')
    else:
        logger.warning(f"Invalid language selection: {form.language.data}")
        flash(get_translation('invalidLanguage', orchestrator.state.language), 'error')
    return redirect(url_for('index'))


@app.route('/view/<name>', methods=['POST'])
@login_required
def change_view(name):
    view = parse_view(name)
    if view is None:
        abort(404)
    orchestrator = get_orchestrator()
    form = ActionForm()
    if form.validate_on_submit():
        orchestrator.set_view(view)
    else:
        flash_form_errors(form, orchestrator.state.language)
    return redirect(url_for('index'))


@app.route('/students', methods=['POST'])
@login_required
def add_student():
    orchestrator = get_orchestrator()
    language = orchestrator.state.language
    form = StudentForm(language)
    if form.validate_on_submit():
        orchestrator.add_student(Student(
            id=str(uuid.uuid4()),
            name=form.name.data.strip(),
            major=form.major.data.strip(),
            monthly_salary=form.monthly_salary.data,
            total_loan=form.total_loan.data
        ))
        flash(get_translation('studentAdded', language), 'success')
    else:
        flash_form_errors(form, language)
    return redirect(url_for('index'))


@app.route('/students/<student_id>/update', methods=['POST'])
@login_required
def update_student(student_id):
    orchestrator = get_orchestrator()
    language = orchestrator.state.language
    form = StudentForm(language)
    if form.validate_on_submit():
        orchestrator.update_student(Student(
            id=student_id,
            name=form.name.data.strip(),
            major=form.major.data.strip(),
            monthly_salary=form.monthly_salary.data,
            total_loan=form.total_loan.data
        ))
        flash(get_translation('studentUpdated', language), 'success')
    else:
        flash_form_errors(form, language)
    return redirect(url_for('index'))


@app.route('/students/<student_id>/delete', methods=['POST'])
@login_required
def delete_student(student_id):
    orchestrator = get_orchestrator()
    language = orchestrator.state.language
    form = ActionForm()
    if form.validate_on_submit():
        orchestrator.delete_student(student_id)
        flash(get_translation('studentDeleted', language), 'success')
    else:
        flash_form_errors(form, language)
    return redirect(url_for('index'))


@app.route('/expenses', methods=['POST'])
@login_required
def add_expense():
    orchestrator = get_orchestrator()
    language = orchestrator.state.language
    form = ExpenseForm(language)
    if form.validate_on_submit():
        orchestrator.add_expense(Expense(
            id=str(uuid.uuid4()),
            category=form.category.data,
            name=form.name.data.strip(),
            amount=form.amount.data
        ))
        flash(get_translation('expenseAdded', language), 'success')
    else:
        flash_form_errors(form, language)
    return redirect(url_for('index'))


@app.route('/goals', methods=['POST'])
@login_required
def add_goal():
    orchestrator = get_orchestrator()
    language = orchestrator.state.language
    form = GoalForm(language)
    if form.validate_on_submit():
        orchestrator.add_goal(SavingsGoal(
            id=str(uuid.uuid4()),
            title=form.title.data.strip(),
            target_amount=form.target_amount.data,
            current_amount=form.current_amount.data,
            color=form.color.data
        ))
        flash(get_translation('goalAdded', language), 'success')
    else:
        flash_form_errors(form, language)
    return redirect(url_for('index'))


@app.route('/simulation', methods=['POST'])
@login_required
def update_simulation():
    orchestrator = get_orchestrator()
    language = orchestrator.state.language
    form = SimulationForm(language)
    if form.validate_on_submit():
        orchestrator.set_interest_rate(form.interest_rate.data)
        orchestrator.set_loan_term_years(form.loan_term_years.data)
        flash(get_translation('simulationUpdated', language), 'success')
    else:
        flash_form_errors(form, language)
    return redirect(url_for('index'))


@app.route('/lessons/<lesson_id>/answer', methods=['POST'])
@login_required
def answer_lesson(lesson_id):
    lesson = get_lesson(lesson_id)
    if lesson is None:
        abort(404)
    orchestrator = get_orchestrator()
    language = orchestrator.state.language
    form = LessonForm(lesson, language, prefix=lesson.id)
    if not form.validate_on_submit():
        flash_form_errors(form, language)
    elif lesson.badge.id in orchestrator.state.earned_badge_ids:
        flash(get_translation('alreadyEarned', language), 'info')
    elif check_answer(lesson, form.choice.data):
        orchestrator.earn_badge(award(lesson))
        logger.info(f"Badge {lesson.badge.id} earned")
        flash(get_translation('correctAnswer', language), 'success')
    else:
        flash(get_translation('wrongAnswer', language), 'warning')
    return redirect(url_for('index'))


@app.route('/notifications/toggle', methods=['POST'])
@login_required
def toggle_notifications():
    orchestrator = get_orchestrator()
    form = ActionForm()
    if form.validate_on_submit():
        orchestrator.toggle_notification_panel()
    else:
        flash_form_errors(form, orchestrator.state.language)
    return redirect(url_for('index'))


@app.route('/notifications/read', methods=['POST'])
@login_required
def mark_notifications_read():
    orchestrator = get_orchestrator()
    form = ActionForm()
    if form.validate_on_submit():
        orchestrator.mark_all_notifications_read()
    else:
        flash_form_errors(form, orchestrator.state.language)
    return redirect(url_for('index'))


# Error handlers
@app.errorhandler(404)
def page_not_found(e):
    language = current_language()
    return render_template(
        '404.html',
        t=lambda key: get_translation(key, language),
        language=language,
        direction='rtl' if language == LanguageCode.ARABIC.value else 'ltr'
    ), 404


@app.errorhandler(500)
def internal_server_error(e):
    logger.error(f"Internal server error: {e}")
    language = current_language()
    return render_template(
        '500.html',
        t=lambda key: get_translation(key, language),
        language=language,
        direction='rtl' if language == LanguageCode.ARABIC.value else 'ltr'
    ), 500


if __name__ == '__main__':
    app.run(debug=False, host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
