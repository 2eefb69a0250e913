GRAPH_PATH_SEGMENT = 'graph'
GRAPH_API_VERSION = 'v1.0'

DEFAULT_HEADERS = {'Content-Type': 'application/json'}
REQUEST_ID_HEADER = 'X-Request-ID'

# drives
PURGE_HEADER = {'Purge': 'T'}
RESTORE_HEADER = {'restore': 'true'}
RESTORE_BODY = '{}'

# relationship keys
ODATA_ID = '@odata.id'
MEMBERS_ODATA_BIND = 'members@odata.bind'

DEFAULT_MAIL_DOMAIN = 'example.com'
