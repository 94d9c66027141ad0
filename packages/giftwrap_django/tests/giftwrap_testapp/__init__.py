"""Django app holding the models used by the giftwrap_django tests."""
