from django.apps import AppConfig


class ApiConfig(AppConfig):
    name = "api"

    def ready(self):
        from django.test.signals import setting_changed

        from services.config import reset_gateway_settings

        setting_changed.connect(reset_gateway_settings, dispatch_uid="reset_gateway_settings")
