import os

DEFAULT_HOST = "localhost"


class DatabaseSettings:
    """Connection settings resolved from the command line and environment"""

    def __init__(self, name, port, user, host=DEFAULT_HOST, password=""):
        self.name = name
        self.port = port
        self.user = user
        self.host = host
        self.password = password

    @classmethod
    def from_args(cls, args, environ=None):
        """
        Build settings from parsed arguments.

        Host: --host, PROFNET_DB_HOST, then localhost.
        Password: PROFNET_DB_PASSWORD, PGPASSWORD, then empty.
        """
        environ = os.environ if environ is None else environ
        host = args.host or environ.get("PROFNET_DB_HOST") or DEFAULT_HOST
        password = environ.get("PROFNET_DB_PASSWORD", environ.get("PGPASSWORD", ""))
        return cls(args.dbname, args.port, args.user, host=host, password=password)
