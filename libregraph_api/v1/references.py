from typing import Dict, Iterable, List

from .consts import GRAPH_API_VERSION, MEMBERS_ODATA_BIND, ODATA_ID
from .endpoints import resolve


def user_url(base_url, user_id, api_version=GRAPH_API_VERSION):
    return resolve(base_url, 'users/' + user_id, api_version=api_version)


def member_reference(base_url, user_id, api_version=GRAPH_API_VERSION) -> Dict[str, str]:
    """Single ``@odata.id`` reference, posted to ``groups/<id>/members/$ref``."""
    return {ODATA_ID: user_url(base_url, user_id, api_version)}


def members_bind(base_url, user_ids: Iterable[str], api_version=GRAPH_API_VERSION) -> Dict[str, List[str]]:
    """``members@odata.bind`` collection, one resolved user url per id, in order."""
    return {MEMBERS_ODATA_BIND: [user_url(base_url, user_id, api_version) for user_id in user_ids]}
