from bodyfit.config.settings import Settings, get_settings, get_settings_for_testing
