"""Rejections raised by the submission pipeline.

Each error carries the HTTP status it maps to and a message that is safe to
return to the caller verbatim.
"""


class SubmissionError(Exception):
    status_code = 500
    message = 'Internal server error'

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self):
        return {'error': self.message}


# Client input errors
class MalformedPayload(SubmissionError):
    status_code = 400
    message = 'Invalid JSON payload'


class InvalidAddress(SubmissionError):
    status_code = 400
    message = 'Invalid wallet address format'


class InvalidScoreType(SubmissionError):
    status_code = 400
    message = 'Score must be an integer'


class ScoreOutOfRange(SubmissionError):
    status_code = 400
    message = 'Score is out of range'


class InvalidTxHash(SubmissionError):
    status_code = 400
    message = 'Invalid transaction hash format'


# Policy rejection
class RateLimitExceeded(SubmissionError):
    status_code = 429
    message = 'Rate limit exceeded'


# Infrastructure errors
class RateLimitCheckFailed(SubmissionError):
    status_code = 500
    message = 'Failed to check rate limit'


class PersistenceFailed(SubmissionError):
    status_code = 500
    message = 'Failed to save score to leaderboard'


class InternalError(SubmissionError):
    status_code = 500
    message = 'Internal server error'
