from .exceptions import DaftError, ConfigurationError
from .handlers import describe_error, error_location, error_trace
