from i18n import get_translated_text, get_translation, missing_keys, translations_for
from models import LanguageCode, Notification
from state import badge_notification
from education import LESSONS, award
from translations import translations


def test_every_language_has_a_table():
    for code in LanguageCode:
        assert code.value in translations


def test_missing_key_falls_back_to_literal_title():
    notification = Notification(
        id='1', title='Welcome!', message='Start tracking your loans today.',
        translation_key_title='welcomeTitle', translation_key_message='welcomeMsg'
    )
    table = {'welcomeMsg': 'Hello'}
    assert get_translated_text(notification, 'title', table) == 'Welcome!'
    assert get_translated_text(notification, 'message', table) == 'Hello'


def test_notification_without_keys_uses_literals():
    notification = Notification(id='x', title='Plain', message='Body')
    assert get_translated_text(notification, 'title', translations_for('English')) == 'Plain'
    assert get_translated_text(notification, 'message', translations_for('English')) == 'Body'


def test_parameter_substitution():
    notification = Notification(
        id='n', title='t', message='m', translation_key_message='badgeEarned',
        translation_params={'badgeName': 'Saver'}
    )
    table = {'badgeEarned': 'You earned the {badgeName} badge!'}
    assert get_translated_text(notification, 'message', table) == 'You earned the Saver badge!'


def test_repeated_placeholder_replaces_first_occurrence_only():
    notification = Notification(
        id='n', title='t', message='m', translation_key_message='k',
        translation_params={'badgeName': 'Saver'}
    )
    table = {'k': '{badgeName} and {badgeName}'}
    assert get_translated_text(notification, 'message', table) == 'Saver and {badgeName}'


def test_multiple_parameters_are_each_substituted():
    notification = Notification(
        id='n', title='t', message='m', translation_key_message='k',
        translation_params={'name': 'Ada', 'count': '3'}
    )
    table = {'k': '{name} earned {count} badges'}
    assert get_translated_text(notification, 'message', table) == 'Ada earned 3 badges'


def test_unknown_parameter_is_left_alone():
    notification = Notification(
        id='n', title='t', message='m', translation_key_message='k',
        translation_params={'other': 'x'}
    )
    assert get_translated_text(notification, 'message', {'k': 'Hi {name}'}) == 'Hi {name}'


def test_badge_notification_is_translated_per_language():
    notification = badge_notification(award(LESSONS[2]))
    spanish = translations_for(LanguageCode.SPANISH)
    assert get_translated_text(notification, 'title', spanish) == '¡Nueva insignia desbloqueada!'
    assert get_translated_text(notification, 'message', spanish) == '¡Obtuviste la insignia Saver!'


def test_unknown_language_has_empty_table():
    assert translations_for('Klingon') == {}


def test_get_translation_falls_back_to_english():
    assert get_translation('dashboard', 'French') == 'Tableau de bord'
    assert get_translation('totalStudents', 'French') == 'Total Students'
    assert get_translation('totalStudents', LanguageCode.ARABIC) == 'Total Students'


def test_get_translation_reports_missing_keys():
    assert get_translation('noSuchKey') == 'Missing translation: noSuchKey'


def test_core_interface_strings_exist_in_every_language():
    core = ['appTitle', 'notifications', 'markAllRead', 'noNotifications', 'dashboard', 'loans',
            'budget', 'dailyAnalysis', 'learn', 'aiAdvisor', 'welcomeTitle', 'welcomeMsg',
            'tipTitle', 'tipMsg', 'badgeUnlocked', 'badgeEarned']
    assert missing_keys(core) == {}


def test_badge_templates_keep_the_placeholder():
    for code in LanguageCode:
        assert '{badgeName}' in translations[code.value]['badgeEarned']


def test_literal_fallback_gets_parameters_filled():
    notification = Notification(
        id='n', title='t', message='You earned the {badgeName} badge!',
        translation_key_message='badgeEarned', translation_params={'badgeName': 'Saver'}
    )
    assert get_translated_text(notification, 'message', {}) == 'You earned the Saver badge!'
