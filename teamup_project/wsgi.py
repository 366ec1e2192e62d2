from django.core.wsgi import get_wsgi_application

from teamup_project.settings.configure import configure_settings_module

configure_settings_module()

application = get_wsgi_application()
