"""
Auth Configuration Models

In-memory representation of the Git provider auth configuration: an ordered
list of servers, each with an ordered list of user auths.
"""

from typing import Any, Dict, List, Optional

from ..core.exceptions import ParsingError


class UserAuth:
    """Credentials of one user on a Git server"""

    def __init__(self, username: str = "", api_token: str = "", bearer_token: str = "",
                 password: str = "", github_app_owner: str = ""):
        self.username = username or ""
        self.api_token = api_token or ""
        self.bearer_token = bearer_token or ""
        self.password = password or ""
        self.github_app_owner = github_app_owner or ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UserAuth':
        """Build a user auth from a gitAuth.yaml users entry"""
        if not isinstance(data, dict):
            raise ParsingError(f"user auth entry must be a mapping, got {type(data).__name__}")
        return cls(
            username=data.get('username', ''),
            api_token=data.get('apitoken', ''),
            bearer_token=data.get('bearertoken', ''),
            password=data.get('password', ''),
            github_app_owner=data.get('githubAppOwner', ''),
        )

    def __repr__(self) -> str:
        return f"UserAuth(username={self.username!r}, github_app_owner={self.github_app_owner!r})"


class AuthServer:
    """A Git server and the users that can authenticate against it"""

    def __init__(self, url: str, users: Optional[List[UserAuth]] = None, name: str = "",
                 kind: str = "", current_user: str = ""):
        self.url = url or ""
        self.users = list(users or [])
        self.name = name or ""
        self.kind = kind or ""
        self.current_user = current_user or ""

    def current_auth(self) -> Optional[UserAuth]:
        """
        Return the current user auth of this server

        The user named by current_user wins; otherwise the first user.

        Returns:
            UserAuth or None when the server has no users
        """
        for user in self.users:
            if user.username == self.current_user:
                return user
        if self.users:
            return self.users[0]
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AuthServer':
        """Build a server from a gitAuth.yaml servers entry"""
        if not isinstance(data, dict):
            raise ParsingError(f"server entry must be a mapping, got {type(data).__name__}")
        users = data.get('users') or []
        if not isinstance(users, list):
            raise ParsingError(f"users of server {data.get('url')!r} must be a list")
        return cls(
            url=data.get('url', ''),
            users=[UserAuth.from_dict(user) for user in users],
            name=data.get('name', ''),
            kind=data.get('kind', ''),
            current_user=data.get('currentuser', ''),
        )

    def __repr__(self) -> str:
        return f"AuthServer(url={self.url!r}, users={len(self.users)})"


class AuthConfig:
    """Ordered collection of Git servers"""

    def __init__(self, servers: Optional[List[AuthServer]] = None, current_server: str = ""):
        self.servers = list(servers or [])
        self.current_server = current_server or ""

    def get_server(self, url: str) -> Optional[AuthServer]:
        """Find a server by URL"""
        for server in self.servers:
            if server.url == url:
                return server
        return None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'AuthConfig':
        """
        Build an auth configuration from parsed gitAuth.yaml content

        Args:
            data: Parsed YAML mapping (None yields an empty configuration)

        Returns:
            AuthConfig

        Raises:
            ParsingError: If the structure is not a valid auth configuration
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ParsingError("auth configuration must be a mapping")
        servers = data.get('servers') or []
        if not isinstance(servers, list):
            raise ParsingError("servers must be a list")
        return cls(
            servers=[AuthServer.from_dict(server) for server in servers],
            current_server=data.get('currentserver', ''),
        )
