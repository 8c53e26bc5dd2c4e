import os
import sys


def main():
    """`eth-gateway [--host H] [--port P]` is `manage.py serve`."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ethgateway.settings")
    from django.core.management import execute_from_command_line

    execute_from_command_line([sys.argv[0], "serve", *sys.argv[1:]])


if __name__ == "__main__":
    main()
