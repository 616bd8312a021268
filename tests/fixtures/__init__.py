"""
Test Fixtures

Sample locale documents as ``localeapp pull`` would write them, keyed by
locale code, and the poll timestamps written to log/localeapp.yml.
"""

POLLED_AT = 1404208800
UPDATED_AT = 1404205200

EN_US = {
    "user": {
        "name": "Name",
        "email": "Email",
        "errors": {
            "required": "This field is required",
        },
    },
    "welcome": "Welcome",
}

FR_FR = {
    "user": {
        "name": "Nom",
        "email": "Courriel",
    },
    "welcome": "Bienvenue",
}

SAMPLE_LOCALES = {
    "en-US": EN_US,
    "fr-FR": FR_FR,
}
