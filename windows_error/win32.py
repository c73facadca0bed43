#!/usr/bin/env python3
"""
windows_error/win32.py

Win32 error codes ([MS-ERREF] 2.2), as returned by GetLastError(). A Win32
code wraps into an HRESULT as 0x8007XXXX (FACILITY_WIN32); to_h_result()
performs that mapping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List

from windows_error.error_code import ErrorCode, ErrorCodeTable, require_uint32

logger = logging.getLogger(__name__)

WIN32_HRESULT_BASE = 0x80070000


@dataclass(frozen=True, eq=False)
class Win32Code(ErrorCode):

    def __post_init__(self) -> None:
        super().__post_init__()
        require_uint32(self.value, "Invalid Error Code Value!")

    def is_failure(self) -> bool:
        return self.value != 0

    def is_success(self) -> bool:
        return not self.is_failure()

    def to_h_result(self) -> int:
        """HRESULT_FROM_WIN32: 0 stays 0, anything else lands in FACILITY_WIN32."""
        if self.value == 0 or self.value & 0x80000000:
            return self.value
        return WIN32_HRESULT_BASE | (self.value & 0xFFFF)


ERROR_SUCCESS = Win32Code("ERROR_SUCCESS", 0x00000000, "The operation completed successfully.")
ERROR_INVALID_FUNCTION = Win32Code("ERROR_INVALID_FUNCTION", 0x00000001, "Incorrect function.")
ERROR_FILE_NOT_FOUND = Win32Code("ERROR_FILE_NOT_FOUND", 0x00000002, "The system cannot find the file specified.")
ERROR_PATH_NOT_FOUND = Win32Code("ERROR_PATH_NOT_FOUND", 0x00000003, "The system cannot find the path specified.")
ERROR_TOO_MANY_OPEN_FILES = Win32Code("ERROR_TOO_MANY_OPEN_FILES", 0x00000004, "The system cannot open the file.")
ERROR_ACCESS_DENIED = Win32Code("ERROR_ACCESS_DENIED", 0x00000005, "Access is denied.")
ERROR_INVALID_HANDLE = Win32Code("ERROR_INVALID_HANDLE", 0x00000006, "The handle is invalid.")
ERROR_ARENA_TRASHED = Win32Code("ERROR_ARENA_TRASHED", 0x00000007, "The storage control blocks were destroyed.")
ERROR_NOT_ENOUGH_MEMORY = Win32Code("ERROR_NOT_ENOUGH_MEMORY", 0x00000008, "Not enough storage is available to process this command.")
ERROR_INVALID_BLOCK = Win32Code("ERROR_INVALID_BLOCK", 0x00000009, "The storage control block address is invalid.")
ERROR_BAD_ENVIRONMENT = Win32Code("ERROR_BAD_ENVIRONMENT", 0x0000000A, "The environment is incorrect.")
ERROR_BAD_FORMAT = Win32Code("ERROR_BAD_FORMAT", 0x0000000B, "An attempt was made to load a program with an incorrect format.")
ERROR_INVALID_ACCESS = Win32Code("ERROR_INVALID_ACCESS", 0x0000000C, "The access code is invalid.")
ERROR_INVALID_DATA = Win32Code("ERROR_INVALID_DATA", 0x0000000D, "The data is invalid.")
ERROR_OUTOFMEMORY = Win32Code("ERROR_OUTOFMEMORY", 0x0000000E, "Not enough storage is available to complete this operation.")
ERROR_INVALID_DRIVE = Win32Code("ERROR_INVALID_DRIVE", 0x0000000F, "The system cannot find the drive specified.")
ERROR_CURRENT_DIRECTORY = Win32Code("ERROR_CURRENT_DIRECTORY", 0x00000010, "The directory cannot be removed.")
ERROR_NOT_SAME_DEVICE = Win32Code("ERROR_NOT_SAME_DEVICE", 0x00000011, "The system cannot move the file to a different disk drive.")
ERROR_NO_MORE_FILES = Win32Code("ERROR_NO_MORE_FILES", 0x00000012, "There are no more files.")
ERROR_WRITE_PROTECT = Win32Code("ERROR_WRITE_PROTECT", 0x00000013, "The media is write-protected.")
ERROR_BAD_UNIT = Win32Code("ERROR_BAD_UNIT", 0x00000014, "The system cannot find the device specified.")
ERROR_NOT_READY = Win32Code("ERROR_NOT_READY", 0x00000015, "The device is not ready.")
ERROR_BAD_COMMAND = Win32Code("ERROR_BAD_COMMAND", 0x00000016, "The device does not recognize the command.")
ERROR_CRC = Win32Code("ERROR_CRC", 0x00000017, "Data error (cyclic redundancy check).")
ERROR_BAD_LENGTH = Win32Code("ERROR_BAD_LENGTH", 0x00000018, "The program issued a command but the command length is incorrect.")
ERROR_SEEK = Win32Code("ERROR_SEEK", 0x00000019, "The drive cannot locate a specific area or track on the disk.")
ERROR_NOT_DOS_DISK = Win32Code("ERROR_NOT_DOS_DISK", 0x0000001A, "The specified disk cannot be accessed.")
ERROR_SECTOR_NOT_FOUND = Win32Code("ERROR_SECTOR_NOT_FOUND", 0x0000001B, "The drive cannot find the sector requested.")
ERROR_OUT_OF_PAPER = Win32Code("ERROR_OUT_OF_PAPER", 0x0000001C, "The printer is out of paper.")
ERROR_WRITE_FAULT = Win32Code("ERROR_WRITE_FAULT", 0x0000001D, "The system cannot write to the specified device.")
ERROR_READ_FAULT = Win32Code("ERROR_READ_FAULT", 0x0000001E, "The system cannot read from the specified device.")
ERROR_GEN_FAILURE = Win32Code("ERROR_GEN_FAILURE", 0x0000001F, "A device attached to the system is not functioning.")
ERROR_SHARING_VIOLATION = Win32Code("ERROR_SHARING_VIOLATION", 0x00000020, "The process cannot access the file because it is being used by another process.")
ERROR_LOCK_VIOLATION = Win32Code("ERROR_LOCK_VIOLATION", 0x00000021, "The process cannot access the file because another process has locked a portion of the file.")
ERROR_WRONG_DISK = Win32Code("ERROR_WRONG_DISK", 0x00000022, "The wrong disk is in the drive. Insert %2 (Volume Serial Number: %3) into drive %1.")
ERROR_SHARING_BUFFER_EXCEEDED = Win32Code("ERROR_SHARING_BUFFER_EXCEEDED", 0x00000024, "Too many files opened for sharing.")
ERROR_HANDLE_EOF = Win32Code("ERROR_HANDLE_EOF", 0x00000026, "Reached the end of the file.")
ERROR_HANDLE_DISK_FULL = Win32Code("ERROR_HANDLE_DISK_FULL", 0x00000027, "The disk is full.")
ERROR_NOT_SUPPORTED = Win32Code("ERROR_NOT_SUPPORTED", 0x00000032, "The request is not supported.")
ERROR_REM_NOT_LIST = Win32Code("ERROR_REM_NOT_LIST", 0x00000033, "Windows cannot find the network path.")
ERROR_DUP_NAME = Win32Code("ERROR_DUP_NAME", 0x00000034, "You were not connected because a duplicate name exists on the network.")
ERROR_BAD_NETPATH = Win32Code("ERROR_BAD_NETPATH", 0x00000035, "The network path was not found.")
ERROR_NETWORK_BUSY = Win32Code("ERROR_NETWORK_BUSY", 0x00000036, "The network is busy.")
ERROR_DEV_NOT_EXIST = Win32Code("ERROR_DEV_NOT_EXIST", 0x00000037, "The specified network resource or device is no longer available.")
ERROR_UNEXP_NET_ERR = Win32Code("ERROR_UNEXP_NET_ERR", 0x0000003B, "An unexpected network error occurred.")
ERROR_NETNAME_DELETED = Win32Code("ERROR_NETNAME_DELETED", 0x00000040, "The specified network name is no longer available.")
ERROR_NETWORK_ACCESS_DENIED = Win32Code("ERROR_NETWORK_ACCESS_DENIED", 0x00000041, "Network access is denied.")
ERROR_BAD_NET_NAME = Win32Code("ERROR_BAD_NET_NAME", 0x00000043, "The network name cannot be found.")
ERROR_FILE_EXISTS = Win32Code("ERROR_FILE_EXISTS", 0x00000050, "The file exists.")
ERROR_CANNOT_MAKE = Win32Code("ERROR_CANNOT_MAKE", 0x00000052, "The directory or file cannot be created.")
ERROR_INVALID_PASSWORD = Win32Code("ERROR_INVALID_PASSWORD", 0x00000056, "The specified network password is not correct.")
ERROR_INVALID_PARAMETER = Win32Code("ERROR_INVALID_PARAMETER", 0x00000057, "The parameter is incorrect.")
ERROR_NET_WRITE_FAULT = Win32Code("ERROR_NET_WRITE_FAULT", 0x00000058, "A write fault occurred on the network.")
ERROR_BROKEN_PIPE = Win32Code("ERROR_BROKEN_PIPE", 0x0000006D, "The pipe has been ended.")
ERROR_OPEN_FAILED = Win32Code("ERROR_OPEN_FAILED", 0x0000006E, "The system cannot open the device or file specified.")
ERROR_BUFFER_OVERFLOW = Win32Code("ERROR_BUFFER_OVERFLOW", 0x0000006F, "The file name is too long.")
ERROR_DISK_FULL = Win32Code("ERROR_DISK_FULL", 0x00000070, "There is not enough space on the disk.")
ERROR_CALL_NOT_IMPLEMENTED = Win32Code("ERROR_CALL_NOT_IMPLEMENTED", 0x00000078, "This function is not supported on this system.")
ERROR_SEM_TIMEOUT = Win32Code("ERROR_SEM_TIMEOUT", 0x00000079, "The semaphore time-out period has expired.")
ERROR_INSUFFICIENT_BUFFER = Win32Code("ERROR_INSUFFICIENT_BUFFER", 0x0000007A, "The data area passed to a system call is too small.")
ERROR_INVALID_NAME = Win32Code("ERROR_INVALID_NAME", 0x0000007B, "The file name, directory name, or volume label syntax is incorrect.")
ERROR_MOD_NOT_FOUND = Win32Code("ERROR_MOD_NOT_FOUND", 0x0000007E, "The specified module could not be found.")
ERROR_PROC_NOT_FOUND = Win32Code("ERROR_PROC_NOT_FOUND", 0x0000007F, "The specified procedure could not be found.")
ERROR_NEGATIVE_SEEK = Win32Code("ERROR_NEGATIVE_SEEK", 0x00000083, "An attempt was made to move the file pointer before the beginning of the file.")
ERROR_DIR_NOT_EMPTY = Win32Code("ERROR_DIR_NOT_EMPTY", 0x00000091, "The directory is not empty.")
ERROR_BAD_ARGUMENTS = Win32Code("ERROR_BAD_ARGUMENTS", 0x000000A0, "One or more arguments are not correct.")
ERROR_BAD_PATHNAME = Win32Code("ERROR_BAD_PATHNAME", 0x000000A1, "The specified path is invalid.")
ERROR_BUSY = Win32Code("ERROR_BUSY", 0x000000AA, "The requested resource is in use.")
ERROR_ALREADY_EXISTS = Win32Code("ERROR_ALREADY_EXISTS", 0x000000B7, "Cannot create a file when that file already exists.")
ERROR_BAD_EXE_FORMAT = Win32Code("ERROR_BAD_EXE_FORMAT", 0x000000C1, "%1 is not a valid Win32 application.")
ERROR_ENVVAR_NOT_FOUND = Win32Code("ERROR_ENVVAR_NOT_FOUND", 0x000000CB, "The system could not find the environment option that was entered.")
ERROR_FILENAME_EXCED_RANGE = Win32Code("ERROR_FILENAME_EXCED_RANGE", 0x000000CE, "The file name or extension is too long.")
ERROR_PIPE_BUSY = Win32Code("ERROR_PIPE_BUSY", 0x000000E7, "All pipe instances are busy.")
ERROR_NO_DATA = Win32Code("ERROR_NO_DATA", 0x000000E8, "The pipe is being closed.")
ERROR_PIPE_NOT_CONNECTED = Win32Code("ERROR_PIPE_NOT_CONNECTED", 0x000000E9, "No process is on the other end of the pipe.")
ERROR_MORE_DATA = Win32Code("ERROR_MORE_DATA", 0x000000EA, "More data is available.")
WAIT_TIMEOUT = Win32Code("WAIT_TIMEOUT", 0x00000102, "The wait operation timed out.")
ERROR_NO_MORE_ITEMS = Win32Code("ERROR_NO_MORE_ITEMS", 0x00000103, "No more data is available.")
ERROR_DIRECTORY = Win32Code("ERROR_DIRECTORY", 0x0000010B, "The directory name is invalid.")
ERROR_PARTIAL_COPY = Win32Code("ERROR_PARTIAL_COPY", 0x0000012B, "Only part of a ReadProcessMemory or WriteProcessMemory request was completed.")
ERROR_INVALID_ADDRESS = Win32Code("ERROR_INVALID_ADDRESS", 0x000001E7, "Attempt to access invalid address.")
ERROR_ARITHMETIC_OVERFLOW = Win32Code("ERROR_ARITHMETIC_OVERFLOW", 0x00000216, "Arithmetic result exceeded 32 bits.")
ERROR_PIPE_CONNECTED = Win32Code("ERROR_PIPE_CONNECTED", 0x00000217, "There is a process on the other end of the pipe.")
ERROR_OPERATION_ABORTED = Win32Code("ERROR_OPERATION_ABORTED", 0x000003E3, "The I/O operation has been aborted because of either a thread exit or an application request.")
ERROR_IO_INCOMPLETE = Win32Code("ERROR_IO_INCOMPLETE", 0x000003E4, "Overlapped I/O event is not in a signaled state.")
ERROR_IO_PENDING = Win32Code("ERROR_IO_PENDING", 0x000003E5, "Overlapped I/O operation is in progress.")
ERROR_NOACCESS = Win32Code("ERROR_NOACCESS", 0x000003E6, "Invalid access to memory location.")
ERROR_STACK_OVERFLOW = Win32Code("ERROR_STACK_OVERFLOW", 0x000003E9, "Recursion too deep; the stack overflowed.")
ERROR_INVALID_FLAGS = Win32Code("ERROR_INVALID_FLAGS", 0x000003EC, "Invalid flags.")
ERROR_SERVICE_REQUEST_TIMEOUT = Win32Code("ERROR_SERVICE_REQUEST_TIMEOUT", 0x0000041D, "The service did not respond to the start or control request in a timely fashion.")
ERROR_SERVICE_DOES_NOT_EXIST = Win32Code("ERROR_SERVICE_DOES_NOT_EXIST", 0x00000424, "The specified service does not exist as an installed service.")
ERROR_SERVICE_ALREADY_RUNNING = Win32Code("ERROR_SERVICE_ALREADY_RUNNING", 0x00000420, "An instance of the service is already running.")
ERROR_SERVICE_DISABLED = Win32Code("ERROR_SERVICE_DISABLED", 0x00000422, "The service cannot be started, either because it is disabled or because it has no enabled devices associated with it.")
ERROR_SERVICE_NOT_ACTIVE = Win32Code("ERROR_SERVICE_NOT_ACTIVE", 0x00000426, "The service has not been started.")
ERROR_NOT_FOUND = Win32Code("ERROR_NOT_FOUND", 0x00000490, "Element not found.")
ERROR_CANCELLED = Win32Code("ERROR_CANCELLED", 0x000004C7, "The operation was canceled by the user.")
ERROR_CONNECTION_REFUSED = Win32Code("ERROR_CONNECTION_REFUSED", 0x000004C9, "The remote computer refused the network connection.")
ERROR_NETWORK_UNREACHABLE = Win32Code("ERROR_NETWORK_UNREACHABLE", 0x000004CF, "The network location cannot be reached.")
ERROR_HOST_UNREACHABLE = Win32Code("ERROR_HOST_UNREACHABLE", 0x000004D0, "The remote system is not reachable by the transport.")
ERROR_PORT_UNREACHABLE = Win32Code("ERROR_PORT_UNREACHABLE", 0x000004D2, "No service is operating at the destination network endpoint on the remote system.")
ERROR_RETRY = Win32Code("ERROR_RETRY", 0x000004D5, "The operation could not be completed. A retry should be performed.")
ERROR_PRIVILEGE_NOT_HELD = Win32Code("ERROR_PRIVILEGE_NOT_HELD", 0x00000522, "A required privilege is not held by the client.")
ERROR_LOGON_FAILURE = Win32Code("ERROR_LOGON_FAILURE", 0x0000052E, "The user name or password is incorrect.")
ERROR_ACCOUNT_RESTRICTION = Win32Code("ERROR_ACCOUNT_RESTRICTION", 0x0000052F, "Account restrictions are preventing this user from signing in.")
ERROR_PASSWORD_EXPIRED = Win32Code("ERROR_PASSWORD_EXPIRED", 0x00000532, "The password for this account has expired.")
ERROR_ACCOUNT_DISABLED = Win32Code("ERROR_ACCOUNT_DISABLED", 0x00000533, "This user can't sign in because this account is currently disabled.")
ERROR_NONE_MAPPED = Win32Code("ERROR_NONE_MAPPED", 0x00000534, "No mapping between account names and security IDs was done.")
ERROR_INVALID_SID = Win32Code("ERROR_INVALID_SID", 0x00000539, "The security ID structure is invalid.")
ERROR_NO_SUCH_DOMAIN = Win32Code("ERROR_NO_SUCH_DOMAIN", 0x0000054B, "The specified domain either does not exist or could not be contacted.")
ERROR_ACCOUNT_LOCKED_OUT = Win32Code("ERROR_ACCOUNT_LOCKED_OUT", 0x00000775, "The referenced account is currently locked out and cannot be logged on to.")
ERROR_TIMEOUT = Win32Code("ERROR_TIMEOUT", 0x000005B4, "This operation returned because the time-out period expired.")
ERROR_INVALID_WINDOW_HANDLE = Win32Code("ERROR_INVALID_WINDOW_HANDLE", 0x00000578, "Invalid window handle.")
ERROR_DLL_INIT_FAILED = Win32Code("ERROR_DLL_INIT_FAILED", 0x0000045A, "A dynamic link library (DLL) initialization routine failed.")
ERROR_NO_SYSTEM_RESOURCES = Win32Code("ERROR_NO_SYSTEM_RESOURCES", 0x000005AA, "Insufficient system resources exist to complete the requested service.")
ERROR_FILE_CORRUPT = Win32Code("ERROR_FILE_CORRUPT", 0x00000570, "The file or directory is corrupted and unreadable.")
ERROR_DISK_CORRUPT = Win32Code("ERROR_DISK_CORRUPT", 0x00000571, "The disk structure is corrupted and unreadable.")
ERROR_INSTALL_FAILURE = Win32Code("ERROR_INSTALL_FAILURE", 0x00000643, "Fatal error during installation.")
ERROR_INSTALL_USEREXIT = Win32Code("ERROR_INSTALL_USEREXIT", 0x00000642, "User cancelled installation.")
ERROR_SUCCESS_REBOOT_REQUIRED = Win32Code("ERROR_SUCCESS_REBOOT_REQUIRED", 0x00000BC2, "The requested operation is successful. Changes will not be effective until the system is rebooted.")
ERROR_SUCCESS_RESTART_REQUIRED = Win32Code("ERROR_SUCCESS_RESTART_REQUIRED", 0x00000BC3, "The requested operation is successful. Changes will not be effective until the service is restarted.")
RPC_S_SERVER_UNAVAILABLE = Win32Code("RPC_S_SERVER_UNAVAILABLE", 0x000006BA, "The RPC server is unavailable.")
RPC_S_CALL_FAILED = Win32Code("RPC_S_CALL_FAILED", 0x000006BE, "The remote procedure call failed.")
ERROR_NO_LOGON_SERVERS = Win32Code("ERROR_NO_LOGON_SERVERS", 0x0000051F, "There are currently no logon servers available to service the logon request.")
ERROR_WRONG_PASSWORD = Win32Code("ERROR_WRONG_PASSWORD", 0x0000052B, "Unable to update the password. The value provided as the current password is incorrect.")
ERROR_NO_TOKEN = Win32Code("ERROR_NO_TOKEN", 0x000003F0, "An attempt was made to reference a token that does not exist.")
ERROR_BAD_USERNAME = Win32Code("ERROR_BAD_USERNAME", 0x0000089A, "The specified user name is invalid.")
ERROR_NOT_CONNECTED = Win32Code("ERROR_NOT_CONNECTED", 0x000008CA, "This network connection does not exist.")
ERROR_ELEVATION_REQUIRED = Win32Code("ERROR_ELEVATION_REQUIRED", 0x000002E4, "The requested operation requires elevation.")
ERROR_NO_SUCH_USER = Win32Code("ERROR_NO_SUCH_USER", 0x00000525, "The specified account does not exist.")
ERROR_USER_EXISTS = Win32Code("ERROR_USER_EXISTS", 0x00000524, "The specified account already exists.")
ERROR_INVALID_SERVICE_CONTROL = Win32Code("ERROR_INVALID_SERVICE_CONTROL", 0x0000041C, "The requested control is not valid for this service.")
ERROR_SERVICE_MARKED_FOR_DELETE = Win32Code("ERROR_SERVICE_MARKED_FOR_DELETE", 0x00000430, "The specified service has been marked for deletion.")
ERROR_SERVICE_EXISTS = Win32Code("ERROR_SERVICE_EXISTS", 0x00000431, "The specified service already exists.")


TABLE = ErrorCodeTable.from_namespace("Win32", globals(), Win32Code)


def find_by_retval(value: Any) -> List[Win32Code]:
    """
    Return every Win32Code whose value equals value, in name-sorted order.
    ERROR_SUCCESS (0) is listed, so find_by_retval(0) returns [ERROR_SUCCESS].
    """
    matches = TABLE.find_by_value(value)
    logger.debug("WIN32_LOOKUP value=0x%08X matches=%d", value, len(matches))
    return matches
