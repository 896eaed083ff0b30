from django.core.cache import caches

TEST_CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "sportsmeet-tests-default",
    },
    "sportsmeet": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "sportsmeet-tests-store",
        "TIMEOUT": None,
    },
}


def clear_test_caches():
    for alias in TEST_CACHES:
        caches[alias].clear()
