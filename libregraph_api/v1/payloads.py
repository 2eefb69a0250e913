from typing import Any, Dict

from .consts import DEFAULT_MAIL_DOMAIN


def prepare_create_user_payload(user_name, password, email=None, display_name=None) -> Dict[str, Any]:
    """
    Body for ``POST users``.

    All recognized fields are always present. ``displayName`` falls back to the
    account name and ``mail`` to ``<user_name>@example.com``. Missing mandatory
    values are not checked, the server rejects them.
    """
    return {
        'onPremisesSamAccountName': user_name,
        'passwordProfile': {'password': password},
        'displayName': display_name if display_name is not None else user_name,
        'mail': email if email is not None else '%s@%s' % (user_name, DEFAULT_MAIL_DOMAIN),
    }


def prepare_patch_user_payload(user_name=None, password=None, email=None, display_name=None) -> Dict[str, Any]:
    """
    Body for ``PATCH users/<id>``.

    Only truthy values are emitted, never as null: the server treats an absent
    field and an explicit null differently. There is no way to clear a field
    through this builder.
    """
    payload: Dict[str, Any] = {}
    if user_name:
        payload['onPremisesSamAccountName'] = user_name
    if password:
        payload['passwordProfile'] = {'password': password}
    if display_name:
        payload['displayName'] = display_name
    if email:
        payload['mail'] = email
    return payload


def prepare_group_payload(display_name) -> Dict[str, Any]:
    return {'displayName': display_name}


def prepare_change_password_payload(current_password, new_password) -> Dict[str, Any]:
    return {
        'currentPassword': current_password,
        'newPassword': new_password,
    }


def prepare_space_payload(name=None, drive_type=None, quota_total=None, description=None,
                          alias=None) -> Dict[str, Any]:
    """Body for creating or updating a drive, with only the given fields."""
    payload: Dict[str, Any] = {}
    if name:
        payload['name'] = name
    if drive_type:
        payload['driveType'] = drive_type
    if quota_total is not None:
        payload['quota'] = {'total': quota_total}
    if description is not None:
        payload['description'] = description
    if alias:
        payload['driveAlias'] = alias
    return payload
