import logging

from django.conf import settings

logging.disable(logging.CRITICAL)


def pytest_configure():
    if settings.configured:
        return
    eway_settings = {
        # eWAY's public sandbox credentials
        'EWAY_CUSTOMER_ID': '87654321',
        'EWAY_USERNAME': 'test@eway.com.au',
        'EWAY_PASSWORD': 'test123',
        'EWAY_TEST_MODE': True,
    }
    try:
        import integration
    except ImportError:
        pass
    else:
        for key, value in vars(integration).items():
            if key.startswith('EWAY'):
                eway_settings[key] = value

    test_settings = {
        'DATABASES': {
            'default': {
                'ENGINE': 'django.db.backends.sqlite3',
                'NAME': ':memory:',
            }
        },
        'INSTALLED_APPS': [
            'django.contrib.auth',
            'django.contrib.admin',
            'django.contrib.contenttypes',
            'django.contrib.sessions',
            'django.contrib.messages',
            'eway',
        ],
        'DEBUG': False,
        'SECRET_KEY': 'eway-tests',
        'USE_TZ': True,
        'DEFAULT_AUTO_FIELD': 'django.db.models.AutoField',
    }
    test_settings.update(eway_settings)
    settings.configure(**test_settings)
