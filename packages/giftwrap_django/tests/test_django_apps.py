import pytest
from django.apps import apps
from django.core.exceptions import ImproperlyConfigured

from giftwrap import JSONSerializerMixin, Presenter, get_config
from giftwrap._state import reset_config
from giftwrap.registry import presenter_path, presenters
from giftwrap_django.apps import GiftWrapDjangoConfig, configure_from_django_settings
from giftwrap_django.presenters import ModelPresenter
from giftwrap_testapp.models import User


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    monkeypatch.delenv("GIFTWRAP_USE_SERIALIZERS", raising=False)
    reset_config()
    yield
    reset_config()


def test_app_config_is_installed():
    assert isinstance(apps.get_app_config("giftwrap_django"), GiftWrapDjangoConfig)


def test_unset_setting_keeps_defaults(settings):
    if hasattr(settings, "GIFTWRAP"):
        del settings.GIFTWRAP

    assert configure_from_django_settings() is None
    assert get_config().use_serializers is True


def test_setting_is_applied(settings):
    settings.GIFTWRAP = {"USE_SERIALIZERS": False}

    config = configure_from_django_settings()

    assert config.use_serializers is False
    assert get_config() is config


def test_presenters_defined_after_ready_follow_the_setting(settings):
    settings.GIFTWRAP = {"USE_SERIALIZERS": False}
    apps.get_app_config("giftwrap_django").ready()

    class QuietPresenter(Presenter):
        pass

    assert not hasattr(QuietPresenter, "as_json")


def test_env_flag_wins_over_setting(settings, monkeypatch):
    settings.GIFTWRAP = {"USE_SERIALIZERS": True}
    monkeypatch.setenv("GIFTWRAP_USE_SERIALIZERS", "false")

    assert configure_from_django_settings().use_serializers is False


def test_non_mapping_setting_is_rejected(settings):
    settings.GIFTWRAP = ["USE_SERIALIZERS"]

    with pytest.raises(ImproperlyConfigured):
        configure_from_django_settings()


def test_model_presenters_follow_the_setting_too(settings):
    settings.GIFTWRAP = {"USE_SERIALIZERS": False}
    configure_from_django_settings()

    class QuietModelPresenter(ModelPresenter):
        model = User

    settings.GIFTWRAP = {"USE_SERIALIZERS": True}
    configure_from_django_settings()

    class LoudModelPresenter(ModelPresenter):
        model = User

    assert not hasattr(QuietModelPresenter, "as_json")
    assert issubclass(LoudModelPresenter, JSONSerializerMixin)


def test_model_presenter_base_is_abstract():
    assert not issubclass(ModelPresenter, JSONSerializerMixin)
    assert ModelPresenter.giftwrap_config is None
    assert presenter_path(ModelPresenter) not in presenters
