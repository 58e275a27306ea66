from flask_wtf import FlaskForm
from wtforms import FloatField, RadioField, SelectField, StringField, SubmitField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange

from finance import EXPENSE_CATEGORIES
from i18n import get_translation
from models import LanguageCode

GOAL_COLORS = [
    ('#3B82F6', 'Blue'),
    ('#10B981', 'Green'),
    ('#F59E0B', 'Amber'),
    ('#8B5CF6', 'Purple'),
    ('#EF4444', 'Red')
]


# Form definitions
class ActionForm(FlaskForm):
    submit = SubmitField(render_kw={'aria-label': 'Submit'})


class LanguageForm(FlaskForm):
    language = SelectField(
        choices=[(code.value, code.value) for code in LanguageCode],
        validators=[DataRequired()],
        render_kw={'aria-label': 'Language', 'onchange': 'this.form.submit()'}
    )


class StudentForm(FlaskForm):
    def __init__(self, language='English', *args, **kwargs):
        super(StudentForm, self).__init__(*args, **kwargs)
        self.name.label.text = get_translation('name', language)
        self.major.label.text = get_translation('major', language)
        self.monthly_salary.label.text = get_translation('monthlySalary', language)
        self.total_loan.label.text = get_translation('totalLoan', language)
        self.submit.label.text = get_translation('addStudent', language)

    name = StringField(validators=[DataRequired(), Length(max=100)], render_kw={'placeholder': 'e.g. Alice Johnson', 'aria-label': 'Name'})
    major = StringField(validators=[DataRequired(), Length(max=100)], render_kw={'placeholder': 'e.g. Computer Science', 'aria-label': 'Major'})
    monthly_salary = FloatField(validators=[InputRequired(), NumberRange(min=0, max=10000000)], render_kw={'placeholder': 'e.g. 4,500', 'aria-label': 'Monthly Salary'})
    total_loan = FloatField(validators=[InputRequired(), NumberRange(min=0, max=100000000)], render_kw={'placeholder': 'e.g. 25,000', 'aria-label': 'Total Loan'})
    submit = SubmitField(render_kw={'aria-label': 'Submit Student Form'})


class ExpenseForm(FlaskForm):
    def __init__(self, language='English', *args, **kwargs):
        super(ExpenseForm, self).__init__(*args, **kwargs)
        self.name.label.text = get_translation('expenseName', language)
        self.category.label.text = get_translation('category', language)
        self.amount.label.text = get_translation('amount', language)
        self.submit.label.text = get_translation('addExpense', language)
        self.category.choices = [(c, get_translation(c, language)) for c in EXPENSE_CATEGORIES]

    name = StringField(validators=[DataRequired(), Length(max=100)], render_kw={'placeholder': 'e.g. Rent', 'aria-label': 'Expense'})
    category = SelectField(choices=[(c, c) for c in EXPENSE_CATEGORIES], validators=[DataRequired()], render_kw={'aria-label': 'Category'})
    amount = FloatField(validators=[InputRequired(), NumberRange(min=0, max=10000000)], render_kw={'placeholder': 'e.g. 850', 'aria-label': 'Amount'})
    submit = SubmitField(render_kw={'aria-label': 'Submit Expense Form'})


class GoalForm(FlaskForm):
    def __init__(self, language='English', *args, **kwargs):
        super(GoalForm, self).__init__(*args, **kwargs)
        self.title.label.text = get_translation('goalTitle', language)
        self.target_amount.label.text = get_translation('targetAmount', language)
        self.current_amount.label.text = get_translation('currentAmount', language)
        self.color.label.text = get_translation('color', language)
        self.submit.label.text = get_translation('addGoal', language)

    title = StringField(validators=[DataRequired(), Length(max=100)], render_kw={'placeholder': 'e.g. Emergency fund', 'aria-label': 'Goal'})
    target_amount = FloatField(validators=[InputRequired(), NumberRange(min=0, max=100000000)], render_kw={'placeholder': 'e.g. 5,000', 'aria-label': 'Target'})
    # no upper bound against the target: saving past a goal is allowed
    current_amount = FloatField(validators=[InputRequired(), NumberRange(min=0, max=100000000)], render_kw={'placeholder': 'e.g. 1,200', 'aria-label': 'Saved so far'})
    color = SelectField(choices=GOAL_COLORS, validators=[DataRequired()], render_kw={'aria-label': 'Color'})
    submit = SubmitField(render_kw={'aria-label': 'Submit Goal Form'})


class SimulationForm(FlaskForm):
    def __init__(self, language='English', *args, **kwargs):
        super(SimulationForm, self).__init__(*args, **kwargs)
        self.interest_rate.label.text = get_translation('interestRate', language)
        self.loan_term_years.label.text = get_translation('loanTermYears', language)
        self.submit.label.text = get_translation('applySimulation', language)

    interest_rate = FloatField(validators=[InputRequired(), NumberRange(min=0, max=100)], render_kw={'step': '0.1', 'aria-label': 'Interest Rate'})
    loan_term_years = FloatField(validators=[InputRequired(), NumberRange(min=1, max=40)], render_kw={'step': '1', 'aria-label': 'Loan Term'})
    submit = SubmitField(render_kw={'aria-label': 'Submit Simulation Form'})


class LessonForm(FlaskForm):
    def __init__(self, lesson, language='English', *args, **kwargs):
        super(LessonForm, self).__init__(*args, **kwargs)
        self.choice.label.text = get_translation(lesson.question_key, language)
        self.choice.choices = [(choice_id, get_translation(key, language)) for choice_id, key in lesson.choices]
        self.submit.label.text = get_translation('checkAnswer', language)

    choice = RadioField(choices=[], validators=[InputRequired()])
    submit = SubmitField(render_kw={'aria-label': 'Submit Answer'})
