from .consts import GRAPH_API_VERSION, GRAPH_PATH_SEGMENT


def resolve(base_url, resource_path, suffix=None, api_version=GRAPH_API_VERSION):
    """
    Build the fully qualified endpoint for a resource path.

    ``https://host`` and ``https://host/`` both resolve ``users`` to
    ``https://host/graph/v1.0/users``. An optional ``suffix`` holds trailing
    path arguments; it is joined with a single slash unless it starts with
    ``?``, in which case it is appended as is. Nothing is validated or encoded.
    """
    url = base_url
    if not url.endswith('/'):
        url += '/'
    url += '%s/%s/%s' % (GRAPH_PATH_SEGMENT, api_version, resource_path.lstrip('/'))
    if suffix:
        if suffix.startswith('?'):
            url += suffix
        else:
            url = url.rstrip('/') + '/' + suffix.lstrip('/')
    return url
