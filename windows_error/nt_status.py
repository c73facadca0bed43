#!/usr/bin/env python3
"""
windows_error/nt_status.py

NTSTATUS values ([MS-ERREF] 2.3). The two high bits carry severity:

    00 success, 01 informational, 10 warning, 11 error
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List

from windows_error.error_code import ErrorCode, ErrorCodeTable, require_uint32

logger = logging.getLogger(__name__)

SEVERITY_SUCCESS = 0
SEVERITY_INFORMATIONAL = 1
SEVERITY_WARNING = 2
SEVERITY_ERROR = 3


@dataclass(frozen=True, eq=False)
class NTStatusCode(ErrorCode):

    def __post_init__(self) -> None:
        super().__post_init__()
        require_uint32(self.value, "Invalid Error Code Value!")

    def severity(self) -> int:
        return self.value >> 30

    def is_error(self) -> bool:
        return self.severity() == SEVERITY_ERROR

    def is_failure(self) -> bool:
        # NT_SUCCESS() treats success and informational as success
        return self.severity() >= SEVERITY_WARNING

    def is_success(self) -> bool:
        return not self.is_failure()


STATUS_SUCCESS = NTStatusCode("STATUS_SUCCESS", 0x00000000, "The operation completed successfully.")
STATUS_WAIT_1 = NTStatusCode("STATUS_WAIT_1", 0x00000001, "The caller specified WaitAny for WaitType and one of the dispatcher objects in the Object array has been set to the signaled state.")
STATUS_WAIT_2 = NTStatusCode("STATUS_WAIT_2", 0x00000002, "The caller specified WaitAny for WaitType and one of the dispatcher objects in the Object array has been set to the signaled state.")
STATUS_WAIT_3 = NTStatusCode("STATUS_WAIT_3", 0x00000003, "The caller specified WaitAny for WaitType and one of the dispatcher objects in the Object array has been set to the signaled state.")
STATUS_ABANDONED = NTStatusCode("STATUS_ABANDONED", 0x00000080, "The caller attempted to wait for a mutex that has been abandoned.")
STATUS_USER_APC = NTStatusCode("STATUS_USER_APC", 0x000000C0, "A user-mode APC was delivered before the given Interval expired.")
STATUS_ALERTED = NTStatusCode("STATUS_ALERTED", 0x00000101, "The delay completed because the thread was alerted.")
STATUS_TIMEOUT = NTStatusCode("STATUS_TIMEOUT", 0x00000102, "The given Timeout interval expired.")
STATUS_PENDING = NTStatusCode("STATUS_PENDING", 0x00000103, "The operation that was requested is pending completion.")
STATUS_REPARSE = NTStatusCode("STATUS_REPARSE", 0x00000104, "A reparse should be performed by the Object Manager because the name of the file resulted in a symbolic link.")
STATUS_MORE_ENTRIES = NTStatusCode("STATUS_MORE_ENTRIES", 0x00000105, "Returned by enumeration APIs to indicate more information is available to successive calls.")
STATUS_NOT_ALL_ASSIGNED = NTStatusCode("STATUS_NOT_ALL_ASSIGNED", 0x00000106, "Indicates not all privileges or groups that are referenced are assigned to the caller.")
STATUS_SOME_NOT_MAPPED = NTStatusCode("STATUS_SOME_NOT_MAPPED", 0x00000107, "Some of the information to be translated has not been translated.")
STATUS_NOTIFY_CLEANUP = NTStatusCode("STATUS_NOTIFY_CLEANUP", 0x0000010B, "Indicates that a notify change request has been completed due to closing the handle that made the notify change request.")
STATUS_NOTIFY_ENUM_DIR = NTStatusCode("STATUS_NOTIFY_ENUM_DIR", 0x0000010C, "Indicates that a notify change request is being completed and that the information is not being returned in the caller's buffer.")
STATUS_BUFFER_ALL_ZEROS = NTStatusCode("STATUS_BUFFER_ALL_ZEROS", 0x00000117, "Specified buffer contains all zeros.")
STATUS_OBJECT_NAME_EXISTS = NTStatusCode("STATUS_OBJECT_NAME_EXISTS", 0x40000000, "{Object Exists} An attempt was made to create an object but the object name already exists.")
STATUS_THREAD_WAS_SUSPENDED = NTStatusCode("STATUS_THREAD_WAS_SUSPENDED", 0x40000001, "{Thread Suspended} A thread termination occurred while the thread was suspended. The thread resumed, and termination proceeded.")
STATUS_WORKING_SET_LIMIT_RANGE = NTStatusCode("STATUS_WORKING_SET_LIMIT_RANGE", 0x40000002, "{Working Set Range Error} An attempt was made to set the working set minimum or maximum to values that are outside the allowable range.")
STATUS_IMAGE_NOT_AT_BASE = NTStatusCode("STATUS_IMAGE_NOT_AT_BASE", 0x40000003, "{Image Relocated} An image file could not be mapped at the address that is specified in the image file. Local fixes must be performed on this image.")
STATUS_LOCAL_USER_SESSION_KEY = NTStatusCode("STATUS_LOCAL_USER_SESSION_KEY", 0x40000006, "{Local Session Key} A user session key was requested for a local remote procedure call (RPC) connection.")
STATUS_BAD_CURRENT_DIRECTORY = NTStatusCode("STATUS_BAD_CURRENT_DIRECTORY", 0x40000007, "{Invalid Current Directory} The process cannot switch to the startup current directory %hs.")
STATUS_SERIAL_MORE_WRITES = NTStatusCode("STATUS_SERIAL_MORE_WRITES", 0x40000008, "{Serial IOCTL Complete} A serial I/O operation was completed by another write to a serial port.")
STATUS_REGISTRY_RECOVERED = NTStatusCode("STATUS_REGISTRY_RECOVERED", 0x40000009, "{Registry Recovery} One of the files that contains the system registry data had to be recovered by using a log or alternate copy. The recovery was successful.")
STATUS_GUARD_PAGE_VIOLATION = NTStatusCode("STATUS_GUARD_PAGE_VIOLATION", 0x80000001, "{EXCEPTION} Guard Page Exception A page of memory that marks the end of a data structure, such as a stack or an array, has been accessed.")
STATUS_DATATYPE_MISALIGNMENT = NTStatusCode("STATUS_DATATYPE_MISALIGNMENT", 0x80000002, "{EXCEPTION} Alignment Fault A data type misalignment was detected in a load or store instruction.")
STATUS_BREAKPOINT = NTStatusCode("STATUS_BREAKPOINT", 0x80000003, "{EXCEPTION} Breakpoint A breakpoint has been reached.")
STATUS_SINGLE_STEP = NTStatusCode("STATUS_SINGLE_STEP", 0x80000004, "{EXCEPTION} Single Step A single step or trace operation has just been completed.")
STATUS_BUFFER_OVERFLOW = NTStatusCode("STATUS_BUFFER_OVERFLOW", 0x80000005, "{Buffer Overflow} The data was too large to fit into the specified buffer.")
STATUS_NO_MORE_FILES = NTStatusCode("STATUS_NO_MORE_FILES", 0x80000006, "{No More Files} No more files were found which match the file specification.")
STATUS_NO_MORE_EAS = NTStatusCode("STATUS_NO_MORE_EAS", 0x80000012, "{No More EAs} No more extended attributes (EAs) were found for the file.")
STATUS_NO_MORE_ENTRIES = NTStatusCode("STATUS_NO_MORE_ENTRIES", 0x8000001A, "{No More Entries} No more entries are available from an enumeration operation.")
STATUS_MEDIA_CHANGED = NTStatusCode("STATUS_MEDIA_CHANGED", 0x8000001C, "{Media Changed} The media has changed.")
STATUS_DEVICE_BUSY = NTStatusCode("STATUS_DEVICE_BUSY", 0x80000011, "{Device Busy} The device is currently busy.")
STATUS_UNSUCCESSFUL = NTStatusCode("STATUS_UNSUCCESSFUL", 0xC0000001, "{Operation Failed} The requested operation was unsuccessful.")
STATUS_NOT_IMPLEMENTED = NTStatusCode("STATUS_NOT_IMPLEMENTED", 0xC0000002, "{Not Implemented} The requested operation is not implemented.")
STATUS_INVALID_INFO_CLASS = NTStatusCode("STATUS_INVALID_INFO_CLASS", 0xC0000003, "{Invalid Parameter} The specified information class is not a valid information class for the specified object.")
STATUS_INFO_LENGTH_MISMATCH = NTStatusCode("STATUS_INFO_LENGTH_MISMATCH", 0xC0000004, "The specified information record length does not match the length that is required for the specified information class.")
STATUS_ACCESS_VIOLATION = NTStatusCode("STATUS_ACCESS_VIOLATION", 0xC0000005, "The instruction at 0x%08lx referenced memory at 0x%08lx. The memory could not be %s.")
STATUS_IN_PAGE_ERROR = NTStatusCode("STATUS_IN_PAGE_ERROR", 0xC0000006, "The instruction at 0x%08lx referenced memory at 0x%08lx. The required data was not placed into memory because of an I/O error status of 0x%08lx.")
STATUS_PAGEFILE_QUOTA = NTStatusCode("STATUS_PAGEFILE_QUOTA", 0xC0000007, "The page file quota for the process has been exhausted.")
STATUS_INVALID_HANDLE = NTStatusCode("STATUS_INVALID_HANDLE", 0xC0000008, "An invalid HANDLE was specified.")
STATUS_BAD_INITIAL_STACK = NTStatusCode("STATUS_BAD_INITIAL_STACK", 0xC0000009, "An invalid initial stack was specified in a call to NtCreateThread.")
STATUS_BAD_INITIAL_PC = NTStatusCode("STATUS_BAD_INITIAL_PC", 0xC000000A, "An invalid initial start address was specified in a call to NtCreateThread.")
STATUS_INVALID_CID = NTStatusCode("STATUS_INVALID_CID", 0xC000000B, "An invalid client ID was specified.")
STATUS_TIMER_NOT_CANCELED = NTStatusCode("STATUS_TIMER_NOT_CANCELED", 0xC000000C, "An attempt was made to cancel or set a timer that has an associated APC and the specified thread is not the thread that originally set the timer with an associated APC routine.")
STATUS_INVALID_PARAMETER = NTStatusCode("STATUS_INVALID_PARAMETER", 0xC000000D, "An invalid parameter was passed to a service or function.")
STATUS_NO_SUCH_DEVICE = NTStatusCode("STATUS_NO_SUCH_DEVICE", 0xC000000E, "A device that does not exist was specified.")
STATUS_NO_SUCH_FILE = NTStatusCode("STATUS_NO_SUCH_FILE", 0xC000000F, "{File Not Found} The file %hs does not exist.")
STATUS_INVALID_DEVICE_REQUEST = NTStatusCode("STATUS_INVALID_DEVICE_REQUEST", 0xC0000010, "The specified request is not a valid operation for the target device.")
STATUS_END_OF_FILE = NTStatusCode("STATUS_END_OF_FILE", 0xC0000011, "The end-of-file marker has been reached. There is no valid data in the file beyond this marker.")
STATUS_WRONG_VOLUME = NTStatusCode("STATUS_WRONG_VOLUME", 0xC0000012, "{Wrong Volume} The wrong volume is in the drive. Insert volume %hs into drive %hs.")
STATUS_NO_MEDIA_IN_DEVICE = NTStatusCode("STATUS_NO_MEDIA_IN_DEVICE", 0xC0000013, "{No Disk} There is no disk in the drive. Insert a disk into drive %hs.")
STATUS_NONEXISTENT_SECTOR = NTStatusCode("STATUS_NONEXISTENT_SECTOR", 0xC0000015, "{Sector Not Found} The specified sector does not exist.")
STATUS_MORE_PROCESSING_REQUIRED = NTStatusCode("STATUS_MORE_PROCESSING_REQUIRED", 0xC0000016, "{Still Busy} The specified I/O request packet (IRP) cannot be disposed of because the I/O operation is not complete.")
STATUS_NO_MEMORY = NTStatusCode("STATUS_NO_MEMORY", 0xC0000017, "{Not Enough Quota} Not enough virtual memory or paging file quota is available to complete the specified operation.")
STATUS_CONFLICTING_ADDRESSES = NTStatusCode("STATUS_CONFLICTING_ADDRESSES", 0xC0000018, "{Conflicting Address Range} The specified address range conflicts with the address space.")
STATUS_NOT_MAPPED_VIEW = NTStatusCode("STATUS_NOT_MAPPED_VIEW", 0xC0000019, "The address range to unmap is not a mapped view.")
STATUS_UNABLE_TO_FREE_VM = NTStatusCode("STATUS_UNABLE_TO_FREE_VM", 0xC000001A, "The virtual memory cannot be freed.")
STATUS_UNABLE_TO_DELETE_SECTION = NTStatusCode("STATUS_UNABLE_TO_DELETE_SECTION", 0xC000001B, "The specified section cannot be deleted.")
STATUS_INVALID_SYSTEM_SERVICE = NTStatusCode("STATUS_INVALID_SYSTEM_SERVICE", 0xC000001C, "An invalid system service was specified in a system service call.")
STATUS_ILLEGAL_INSTRUCTION = NTStatusCode("STATUS_ILLEGAL_INSTRUCTION", 0xC000001D, "{EXCEPTION} Illegal Instruction An attempt was made to execute an illegal instruction.")
STATUS_INVALID_LOCK_SEQUENCE = NTStatusCode("STATUS_INVALID_LOCK_SEQUENCE", 0xC000001E, "{Invalid Lock Sequence} An attempt was made to execute an invalid lock sequence.")
STATUS_INVALID_VIEW_SIZE = NTStatusCode("STATUS_INVALID_VIEW_SIZE", 0xC000001F, "{Invalid Mapping} An attempt was made to create a view for a section that is bigger than the section.")
STATUS_INVALID_FILE_FOR_SECTION = NTStatusCode("STATUS_INVALID_FILE_FOR_SECTION", 0xC0000020, "{Bad File} The attributes of the specified mapping file for a section of memory cannot be read.")
STATUS_ALREADY_COMMITTED = NTStatusCode("STATUS_ALREADY_COMMITTED", 0xC0000021, "{Already Committed} The specified address range is already committed.")
STATUS_ACCESS_DENIED = NTStatusCode("STATUS_ACCESS_DENIED", 0xC0000022, "{Access Denied} A process has requested access to an object but has not been granted those access rights.")
STATUS_BUFFER_TOO_SMALL = NTStatusCode("STATUS_BUFFER_TOO_SMALL", 0xC0000023, "{Buffer Too Small} The buffer is too small to contain the entry. No information has been written to the buffer.")
STATUS_OBJECT_TYPE_MISMATCH = NTStatusCode("STATUS_OBJECT_TYPE_MISMATCH", 0xC0000024, "{Wrong Type} There is a mismatch between the type of object that is required by the requested operation and the type of object that is specified in the request.")
STATUS_NONCONTINUABLE_EXCEPTION = NTStatusCode("STATUS_NONCONTINUABLE_EXCEPTION", 0xC0000025, "{EXCEPTION} Cannot Continue Windows cannot continue from this exception.")
STATUS_INVALID_DISPOSITION = NTStatusCode("STATUS_INVALID_DISPOSITION", 0xC0000026, "An invalid exception disposition was returned by an exception handler.")
STATUS_UNWIND = NTStatusCode("STATUS_UNWIND", 0xC0000027, "Unwind exception code.")
STATUS_BAD_STACK = NTStatusCode("STATUS_BAD_STACK", 0xC0000028, "An invalid or unaligned stack was encountered during an unwind operation.")
STATUS_INVALID_UNWIND_TARGET = NTStatusCode("STATUS_INVALID_UNWIND_TARGET", 0xC0000029, "An invalid unwind target was encountered during an unwind operation.")
STATUS_NOT_LOCKED = NTStatusCode("STATUS_NOT_LOCKED", 0xC000002A, "An attempt was made to unlock a page of memory that was not locked.")
STATUS_PARITY_ERROR = NTStatusCode("STATUS_PARITY_ERROR", 0xC000002B, "A device parity error on an I/O operation.")
STATUS_UNABLE_TO_DECOMMIT_VM = NTStatusCode("STATUS_UNABLE_TO_DECOMMIT_VM", 0xC000002C, "An attempt was made to decommit uncommitted virtual memory.")
STATUS_NOT_COMMITTED = NTStatusCode("STATUS_NOT_COMMITTED", 0xC000002D, "An attempt was made to change the attributes on memory that has not been committed.")
STATUS_INVALID_PORT_ATTRIBUTES = NTStatusCode("STATUS_INVALID_PORT_ATTRIBUTES", 0xC000002E, "Invalid object attributes specified to NtCreatePort or invalid port attributes specified to NtConnectPort.")
STATUS_PORT_MESSAGE_TOO_LONG = NTStatusCode("STATUS_PORT_MESSAGE_TOO_LONG", 0xC000002F, "The length of the message that was passed to NtRequestPort or NtRequestWaitReplyPort is longer than the maximum message that is allowed by the port.")
STATUS_INVALID_PARAMETER_MIX = NTStatusCode("STATUS_INVALID_PARAMETER_MIX", 0xC0000030, "An invalid combination of parameters was specified.")
STATUS_OBJECT_NAME_INVALID = NTStatusCode("STATUS_OBJECT_NAME_INVALID", 0xC0000033, "The object name is invalid.")
STATUS_OBJECT_NAME_NOT_FOUND = NTStatusCode("STATUS_OBJECT_NAME_NOT_FOUND", 0xC0000034, "The object name is not found.")
STATUS_OBJECT_NAME_COLLISION = NTStatusCode("STATUS_OBJECT_NAME_COLLISION", 0xC0000035, "The object name already exists.")
STATUS_OBJECT_PATH_INVALID = NTStatusCode("STATUS_OBJECT_PATH_INVALID", 0xC0000039, "The object path component was not a directory object.")
STATUS_OBJECT_PATH_NOT_FOUND = NTStatusCode("STATUS_OBJECT_PATH_NOT_FOUND", 0xC000003A, "{Path Not Found} The path %hs does not exist.")
STATUS_OBJECT_PATH_SYNTAX_BAD = NTStatusCode("STATUS_OBJECT_PATH_SYNTAX_BAD", 0xC000003B, "The object path component was not a directory object.")
STATUS_SHARING_VIOLATION = NTStatusCode("STATUS_SHARING_VIOLATION", 0xC0000043, "A file cannot be opened because the share access flags are incompatible.")
STATUS_QUOTA_EXCEEDED = NTStatusCode("STATUS_QUOTA_EXCEEDED", 0xC0000044, "Insufficient quota exists to complete the operation.")
STATUS_DELETE_PENDING = NTStatusCode("STATUS_DELETE_PENDING", 0xC0000056, "A non-close operation has been requested of a file object that has a delete pending.")
STATUS_PRIVILEGE_NOT_HELD = NTStatusCode("STATUS_PRIVILEGE_NOT_HELD", 0xC0000061, "A required privilege is not held by the client.")
STATUS_LOGON_FAILURE = NTStatusCode("STATUS_LOGON_FAILURE", 0xC000006D, "The attempted logon is invalid. This is either due to a bad username or authentication information.")
STATUS_ACCOUNT_RESTRICTION = NTStatusCode("STATUS_ACCOUNT_RESTRICTION", 0xC000006E, "Indicates a referenced user name and authentication information are valid, but some user account restriction has prevented successful authentication (such as time-of-day restrictions).")
STATUS_PASSWORD_EXPIRED = NTStatusCode("STATUS_PASSWORD_EXPIRED", 0xC0000071, "The user account password has expired.")
STATUS_ACCOUNT_DISABLED = NTStatusCode("STATUS_ACCOUNT_DISABLED", 0xC0000072, "The referenced account is currently disabled and cannot be logged on to.")
STATUS_NONE_MAPPED = NTStatusCode("STATUS_NONE_MAPPED", 0xC0000073, "None of the information to be translated has been translated.")
STATUS_INSUFFICIENT_RESOURCES = NTStatusCode("STATUS_INSUFFICIENT_RESOURCES", 0xC000009A, "Insufficient system resources exist to complete the API.")
STATUS_DEVICE_NOT_READY = NTStatusCode("STATUS_DEVICE_NOT_READY", 0xC00000A3, "{Drive Not Ready} The drive is not ready for use; its door might be open.")
STATUS_NOT_SUPPORTED = NTStatusCode("STATUS_NOT_SUPPORTED", 0xC00000BB, "The request is not supported.")
STATUS_BAD_NETWORK_PATH = NTStatusCode("STATUS_BAD_NETWORK_PATH", 0xC00000BE, "The network path cannot be located.")
STATUS_NETWORK_BUSY = NTStatusCode("STATUS_NETWORK_BUSY", 0xC00000BF, "The network is busy.")
STATUS_BAD_NETWORK_NAME = NTStatusCode("STATUS_BAD_NETWORK_NAME", 0xC00000CC, "{Network Name Not Found} The specified share name cannot be found on the remote server.")
STATUS_FILE_IS_A_DIRECTORY = NTStatusCode("STATUS_FILE_IS_A_DIRECTORY", 0xC00000BA, "The file that was specified as a target is a directory, and the caller specified that it could be anything but a directory.")
STATUS_IO_TIMEOUT = NTStatusCode("STATUS_IO_TIMEOUT", 0xC00000B5, "{Device Timeout} The specified I/O operation on %hs was not completed before the time-out period expired.")
STATUS_PIPE_BROKEN = NTStatusCode("STATUS_PIPE_BROKEN", 0xC000014B, "The pipe operation has failed because the other end of the pipe has been closed.")
STATUS_INTERNAL_ERROR = NTStatusCode("STATUS_INTERNAL_ERROR", 0xC00000E5, "An internal error occurred.")
STATUS_DIRECTORY_NOT_EMPTY = NTStatusCode("STATUS_DIRECTORY_NOT_EMPTY", 0xC0000101, "Indicates that the directory trying to be deleted is not empty.")
STATUS_NOT_A_DIRECTORY = NTStatusCode("STATUS_NOT_A_DIRECTORY", 0xC0000103, "A requested opened file is not a directory.")
STATUS_CANCELLED = NTStatusCode("STATUS_CANCELLED", 0xC0000120, "The I/O request was canceled.")
STATUS_DLL_NOT_FOUND = NTStatusCode("STATUS_DLL_NOT_FOUND", 0xC0000135, "{Unable To Locate Component} This application has failed to start because %hs was not found. Reinstalling the application might fix this problem.")
STATUS_ENTRYPOINT_NOT_FOUND = NTStatusCode("STATUS_ENTRYPOINT_NOT_FOUND", 0xC0000139, "{Entry Point Not Found} The procedure entry point %hs could not be located in the dynamic link library %hs.")
STATUS_DLL_INIT_FAILED = NTStatusCode("STATUS_DLL_INIT_FAILED", 0xC0000142, "{DLL Initialization Failed} Initialization of the dynamic link library %hs failed. The process is terminating abnormally.")
STATUS_ACCOUNT_LOCKED_OUT = NTStatusCode("STATUS_ACCOUNT_LOCKED_OUT", 0xC0000234, "The user account has been automatically locked because too many invalid logon attempts or password change attempts have been requested.")
STATUS_CONNECTION_REFUSED = NTStatusCode("STATUS_CONNECTION_REFUSED", 0xC0000236, "The transport connection attempt was refused by the remote system.")
STATUS_HOST_UNREACHABLE = NTStatusCode("STATUS_HOST_UNREACHABLE", 0xC000023D, "The transport determined that the remote system is unreachable.")
STATUS_NOT_FOUND = NTStatusCode("STATUS_NOT_FOUND", 0xC0000225, "The object was not found.")
STATUS_STACK_BUFFER_OVERRUN = NTStatusCode("STATUS_STACK_BUFFER_OVERRUN", 0xC0000409, "The system detected an overrun of a stack-based buffer in this application.")
STATUS_HEAP_CORRUPTION = NTStatusCode("STATUS_HEAP_CORRUPTION", 0xC0000374, "A heap has been corrupted.")
STATUS_ASSERTION_FAILURE = NTStatusCode("STATUS_ASSERTION_FAILURE", 0xC0000420, "An assertion failure has occurred.")
STATUS_INTEGER_DIVIDE_BY_ZERO = NTStatusCode("STATUS_INTEGER_DIVIDE_BY_ZERO", 0xC0000094, "{EXCEPTION} Integer division by zero.")
STATUS_INTEGER_OVERFLOW = NTStatusCode("STATUS_INTEGER_OVERFLOW", 0xC0000095, "{EXCEPTION} Integer overflow.")
STATUS_PRIVILEGED_INSTRUCTION = NTStatusCode("STATUS_PRIVILEGED_INSTRUCTION", 0xC0000096, "{EXCEPTION} Privileged instruction.")
STATUS_STACK_OVERFLOW = NTStatusCode("STATUS_STACK_OVERFLOW", 0xC00000FD, "A new guard page for the stack cannot be created.")
STATUS_CONTROL_C_EXIT = NTStatusCode("STATUS_CONTROL_C_EXIT", 0xC000013A, "{Application Exit by CTRL+C} The application terminated as a result of a CTRL+C.")


TABLE = ErrorCodeTable.from_namespace("NTSTATUS", globals(), NTStatusCode)


def find_by_retval(value: Any) -> List[NTStatusCode]:
    """
    Return every NTStatusCode whose value equals value, in name-sorted order.
    STATUS_SUCCESS (0) is listed.
    """
    matches = TABLE.find_by_value(value)
    logger.debug("NTSTATUS_LOOKUP value=0x%08X matches=%d", value, len(matches))
    return matches
