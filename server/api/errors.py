"""Exception hierarchy for Twitch interactions."""


class TwitchAPIError(Exception):
    """Base error for Twitch API interactions."""


class TwitchAuthError(TwitchAPIError):
    """Raised when acquiring an OAuth token fails."""


class TwitchRequestError(TwitchAPIError):
    """Raised when an HTTP request to Twitch fails."""
