"""Error messages recorded on authentication objects.

These messages are appended to ``AuthManager.errors`` (or an encryption
strategy's ``errors``) instead of being raised, so callers can compare them
verbatim against the output of ``error()``. The trailing spaces are part of
the messages.
"""

NO_AUTHTYPE = "Specified authentication access class could not be found. "
NO_ENCTYPE = "Specified encryption method could not be found. "

READ_ONLY = "This authentication backend is read-only. "
ACCOUNT_EXISTS = "Account already exists. "
LOGIN_NOT_FOUND = "Specified login could not be found. "
LOGIN_NOT_UNIQUE = "Specified login is not unique. "
INCORRECT_PASSWORD = "Specified password is not correct. "

# Prefixes, followed by the underlying driver message
DATABASE_ERROR = "Database error: "
DIRECTORY_ERROR = "Directory error: "
