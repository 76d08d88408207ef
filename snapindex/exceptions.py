"""snapindex Exceptions"""
class SnapIndexException(Exception):
    """
    Base class for all exceptions raised by snapindex which are not Elasticsearch
    exceptions.
    """

class ConfigurationError(SnapIndexException):
    """
    Exception raised when a misconfiguration is detected
    """

class MissingArgument(SnapIndexException):
    """
    Exception raised when a needed argument is not passed.
    """

class RepositoryNotFound(SnapIndexException):
    """
    Exception raised when a repository or snapshot lookup returns an error response
    """

class SafetyMismatch(SnapIndexException):
    """
    Exception raised when the restore target does not match the snapshot name
    """

class UserAborted(SnapIndexException):
    """
    Exception raised when the operator declines to proceed with a restore
    """

class PrivilegeError(SnapIndexException):
    """
    Exception raised when snapindex is required to run as root and is not
    """

class FailedExecution(SnapIndexException):
    """
    Exception raised when a request to the snapshot API fails to execute.
    """

class ClientException(SnapIndexException):
    """
    Exception raised when the Elasticsearch client and/or connection is the source of the problem.
    """

class LoggingException(SnapIndexException):
    """
    Exception raised when snapindex cannot either log or configure logging
    """
