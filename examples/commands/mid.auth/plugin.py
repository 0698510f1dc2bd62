"""Drops messages from users outside the allowed roles."""

from egile_plugin_loader.plugins import Middleware


class Auth(Middleware):
    def __init__(self, roles=("admin",)):
        self.roles = set(roles)

    def execute(self, message, user_roles=(), *args, **kwargs):
        if self.roles.intersection(user_roles):
            return message
        return None


def create():
    return Auth()
