import os
from dotenv import load_dotenv

load_dotenv()

# Set the Django settings module to use the consolidated settings
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "teamup_project.settings.settings")


def configure_settings_module():
    """
    Point DJANGO_SETTINGS_MODULE at the consolidated settings file.
    Environment-specific values come from environment variables.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "teamup_project.settings.settings")
