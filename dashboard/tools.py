import logging

from wtforms import Form

from dashboard import cache

# Matches the default key_prefix of cache.cached() for views
VIEW_CACHE_KEY = 'view/{path}'

def revalidate_path(path: str) -> None:
    '''
    Drops cached response of the view served at <path>
    so it's rendered again on next request
    '''
    logger = logging.getLogger('revalidate_path')
    cache.delete(VIEW_CACHE_KEY.format(path=path))
    logger.debug("Cache for %s is invalidated", path)

def get_field_errors(form: Form) -> dict[str, list[str]]:
    '''
    Returns validation errors of the form keyed by the names
    of the submitted fields. Only failed fields are included,
    CSRF token check isn't a field error
    '''
    return {field.name: list(field.errors) for field in form
            if field.errors and field.name != form.meta.csrf_field_name}

def is_csrf_failed(form: Form) -> bool:
    name = form.meta.csrf_field_name
    return name in form and bool(form[name].errors)
