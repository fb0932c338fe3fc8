#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""
import os
import sys


def main():
    """Run administrative tasks."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    # Bare `runserver` listens on PORT from the environment (default 5000)
    if sys.argv[1:] == ['runserver']:
        from decouple import config
        sys.argv.append(f"{config('HOST', default='127.0.0.1')}:{config('PORT', default=5000, cast=int)}")

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
