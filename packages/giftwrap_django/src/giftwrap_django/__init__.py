"""
giftwrap_django: Django model support for giftwrap presenters.

Add ``"giftwrap_django"`` to ``INSTALLED_APPS`` to load ``settings.GIFTWRAP``,
and subclass :class:`giftwrap_django.presenters.ModelPresenter` to delegate
model columns en masse.
"""
