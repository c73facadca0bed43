#!/usr/bin/env python3
"""
windows_error/h_result/codes.py

HRESULT values from [MS-ERREF] 2.1.1. Every constant is an HResultCode;
TABLE collects them in declaration order and find_by_retval() searches it.

See https://learn.microsoft.com/en-us/openspecs/windows_protocols/ms-erref/705fb797-2175-4a90-b5a3-3918024b10b8
"""

from __future__ import annotations

import logging
from typing import Any, List

from windows_error.error_code import ErrorCodeTable
from windows_error.h_result.h_result_code import HResultCode

logger = logging.getLogger(__name__)


# ============================================================
# Success codes
# ============================================================

STG_S_CONVERTED = HResultCode("STG_S_CONVERTED", 0x00030200, "The underlying file was converted to compound file format.")
STG_S_BLOCK = HResultCode("STG_S_BLOCK", 0x00030201, "The storage operation should block until more data is available.")
STG_S_RETRYNOW = HResultCode("STG_S_RETRYNOW", 0x00030202, "The storage operation should retry immediately.")
STG_S_MONITORING = HResultCode("STG_S_MONITORING", 0x00030203, "The notified event sink will not influence the storage operation.")
STG_S_MULTIPLEOPENS = HResultCode("STG_S_MULTIPLEOPENS", 0x00030204, "Multiple opens prevent consolidated (commit succeeded).")
STG_S_CONSOLIDATIONFAILED = HResultCode("STG_S_CONSOLIDATIONFAILED", 0x00030205, "Consolidation of the storage file failed (commit succeeded).")
STG_S_CANNOTCONSOLIDATE = HResultCode("STG_S_CANNOTCONSOLIDATE", 0x00030206, "Consolidation of the storage file is inappropriate (commit succeeded).")
OLE_S_USEREG = HResultCode("OLE_S_USEREG", 0x00040000, "Use the registry database to provide the requested information.")
OLE_S_STATIC = HResultCode("OLE_S_STATIC", 0x00040001, "Success, but static.")
OLE_S_MAC_CLIPFORMAT = HResultCode("OLE_S_MAC_CLIPFORMAT", 0x00040002, "Macintosh clipboard format.")
DRAGDROP_S_DROP = HResultCode("DRAGDROP_S_DROP", 0x00040100, "Successful drop took place.")
DRAGDROP_S_CANCEL = HResultCode("DRAGDROP_S_CANCEL", 0x00040101, "Drag-drop operation canceled.")
DRAGDROP_S_USEDEFAULTCURSORS = HResultCode("DRAGDROP_S_USEDEFAULTCURSORS", 0x00040102, "Use the default cursor.")
DATA_S_SAMEFORMATETC = HResultCode("DATA_S_SAMEFORMATETC", 0x00040130, "Data has same FORMATETC.")
VIEW_S_ALREADY_FROZEN = HResultCode("VIEW_S_ALREADY_FROZEN", 0x00040140, "View is already frozen.")
CACHE_S_FORMATETC_NOTSUPPORTED = HResultCode("CACHE_S_FORMATETC_NOTSUPPORTED", 0x00040170, "FORMATETC not supported.")
CACHE_S_SAMECACHE = HResultCode("CACHE_S_SAMECACHE", 0x00040171, "Same cache.")
CACHE_S_SOMECACHES_NOTUPDATED = HResultCode("CACHE_S_SOMECACHES_NOTUPDATED", 0x00040172, "Some caches are not updated.")
OLEOBJ_S_INVALIDVERB = HResultCode("OLEOBJ_S_INVALIDVERB", 0x00040180, "Invalid verb for OLE object.")
OLEOBJ_S_CANNOT_DOVERB_NOW = HResultCode("OLEOBJ_S_CANNOT_DOVERB_NOW", 0x00040181, "Verb number is valid but verb cannot be done now.")
OLEOBJ_S_INVALIDHWND = HResultCode("OLEOBJ_S_INVALIDHWND", 0x00040182, "Invalid window handle passed.")
INPLACE_S_TRUNCATED = HResultCode("INPLACE_S_TRUNCATED", 0x000401A0, "Message is too long; some of it had to be truncated before displaying.")
CONVERT10_S_NO_PRESENTATION = HResultCode("CONVERT10_S_NO_PRESENTATION", 0x000401C0, "Unable to convert OLESTREAM to IStorage.")
MK_S_REDUCED_TO_SELF = HResultCode("MK_S_REDUCED_TO_SELF", 0x000401E2, "Moniker reduced to itself.")
MK_S_ME = HResultCode("MK_S_ME", 0x000401E4, "Common prefix is this moniker.")
MK_S_HIM = HResultCode("MK_S_HIM", 0x000401E5, "Common prefix is input moniker.")
MK_S_US = HResultCode("MK_S_US", 0x000401E6, "Common prefix is both monikers.")
MK_S_MONIKERALREADYREGISTERED = HResultCode("MK_S_MONIKERALREADYREGISTERED", 0x000401E7, "Moniker is already registered in running object table.")
SCHED_S_TASK_READY = HResultCode("SCHED_S_TASK_READY", 0x00041300, "The task is ready to run at its next scheduled time.")
SCHED_S_TASK_RUNNING = HResultCode("SCHED_S_TASK_RUNNING", 0x00041301, "The task is currently running.")
SCHED_S_TASK_DISABLED = HResultCode("SCHED_S_TASK_DISABLED", 0x00041302, "The task will not run at the scheduled times because it has been disabled.")
SCHED_S_TASK_HAS_NOT_RUN = HResultCode("SCHED_S_TASK_HAS_NOT_RUN", 0x00041303, "The task has not yet run.")
SCHED_S_TASK_NO_MORE_RUNS = HResultCode("SCHED_S_TASK_NO_MORE_RUNS", 0x00041304, "There are no more runs scheduled for this task.")
SCHED_S_TASK_NOT_SCHEDULED = HResultCode("SCHED_S_TASK_NOT_SCHEDULED", 0x00041305, "One or more of the properties that are needed to run this task on a schedule have not been set.")
SCHED_S_TASK_TERMINATED = HResultCode("SCHED_S_TASK_TERMINATED", 0x00041306, "The last run of the task was terminated by the user.")
SCHED_S_TASK_NO_VALID_TRIGGERS = HResultCode("SCHED_S_TASK_NO_VALID_TRIGGERS", 0x00041307, "Either the task has no triggers, or the existing triggers are disabled or not set.")
SCHED_S_EVENT_TRIGGER = HResultCode("SCHED_S_EVENT_TRIGGER", 0x00041308, "Event triggers do not have set run times.")
SCHED_S_SOME_TRIGGERS_FAILED = HResultCode("SCHED_S_SOME_TRIGGERS_FAILED", 0x0004131B, "The task is registered, but not all specified triggers will start the task.")
SCHED_S_BATCH_LOGON_PROBLEM = HResultCode("SCHED_S_BATCH_LOGON_PROBLEM", 0x0004131C, "The task is registered, but it might fail to start. Batch logon privilege needs to be enabled for the task principal.")
XACT_S_ASYNC = HResultCode("XACT_S_ASYNC", 0x0004D000, "An asynchronous operation was specified. The operation has begun, but its outcome is not known yet.")
XACT_S_READONLY = HResultCode("XACT_S_READONLY", 0x0004D002, "The method call succeeded because the transaction was read-only.")
XACT_S_SOMENORETAIN = HResultCode("XACT_S_SOMENORETAIN", 0x0004D003, "The transaction was successfully aborted. However, this is a coordinated transaction, and a number of enlisted resources were aborted outright because they could not support abort-retaining semantics.")
XACT_S_OKINFORM = HResultCode("XACT_S_OKINFORM", 0x0004D004, "No changes were made during this call, but the sink wants another chance to look if any other sinks make further changes.")
XACT_S_MADECHANGESCONTENT = HResultCode("XACT_S_MADECHANGESCONTENT", 0x0004D005, "The sink is content and wants the transaction to proceed. Changes were made to one or more resources during this call.")
XACT_S_MADECHANGESINFORM = HResultCode("XACT_S_MADECHANGESINFORM", 0x0004D006, "The sink is for the moment and wants the transaction to proceed, but if other changes are made following this return by other event sinks, this sink wants another chance to look.")
XACT_S_ALLNORETAIN = HResultCode("XACT_S_ALLNORETAIN", 0x0004D007, "The transaction was successfully aborted. However, the abort was nonretaining.")
XACT_S_ABORTING = HResultCode("XACT_S_ABORTING", 0x0004D008, "An abort operation was already in progress.")
XACT_S_SINGLEPHASE = HResultCode("XACT_S_SINGLEPHASE", 0x0004D009, "The resource manager has performed a single-phase commit of the transaction.")
XACT_S_LOCALLY_OK = HResultCode("XACT_S_LOCALLY_OK", 0x0004D00A, "The local transaction has not aborted.")
XACT_S_LASTRESOURCEMANAGER = HResultCode("XACT_S_LASTRESOURCEMANAGER", 0x0004D010, "The resource manager has requested to be the coordinator (last resource manager) for the transaction.")
CO_S_NOTALLINTERFACES = HResultCode("CO_S_NOTALLINTERFACES", 0x00080012, "Not all the requested interfaces were available.")
CO_S_MACHINENAMENOTFOUND = HResultCode("CO_S_MACHINENAMENOTFOUND", 0x00080013, "The specified machine name was not found in the cache.")
SEC_I_CONTINUE_NEEDED = HResultCode("SEC_I_CONTINUE_NEEDED", 0x00090312, "The function completed successfully, but it must be called again to complete the context.")
SEC_I_COMPLETE_NEEDED = HResultCode("SEC_I_COMPLETE_NEEDED", 0x00090313, "The function completed successfully, but CompleteToken must be called.")
SEC_I_COMPLETE_AND_CONTINUE = HResultCode("SEC_I_COMPLETE_AND_CONTINUE", 0x00090314, "The function completed successfully, but both CompleteToken and this function must be called to complete the context.")
SEC_I_LOCAL_LOGON = HResultCode("SEC_I_LOCAL_LOGON", 0x00090315, "The logon was completed, but no network authority was available. The logon was made using locally known information.")
SEC_I_CONTEXT_EXPIRED = HResultCode("SEC_I_CONTEXT_EXPIRED", 0x00090317, "The context has expired and can no longer be used.")
SEC_I_INCOMPLETE_CREDENTIALS = HResultCode("SEC_I_INCOMPLETE_CREDENTIALS", 0x00090320, "The credentials supplied were not complete and could not be verified. Additional information can be returned from the context.")
SEC_I_RENEGOTIATE = HResultCode("SEC_I_RENEGOTIATE", 0x00090321, "The context data must be renegotiated with the peer.")
SEC_I_NO_LSA_CONTEXT = HResultCode("SEC_I_NO_LSA_CONTEXT", 0x00090323, "There is no LSA mode context associated with this context.")
SEC_I_SIGNATURE_NEEDED = HResultCode("SEC_I_SIGNATURE_NEEDED", 0x0009035C, "A signature operation must be performed before the user can authenticate.")
CRYPT_I_NEW_PROTECTION_REQUIRED = HResultCode("CRYPT_I_NEW_PROTECTION_REQUIRED", 0x00091012, "The protected data needs to be reprotected.")
NS_S_CALLPENDING = HResultCode("NS_S_CALLPENDING", 0x000D0000, "The requested operation is pending completion.")
NS_S_CALLABORTED = HResultCode("NS_S_CALLABORTED", 0x000D0001, "The requested operation was aborted by the client.")
NS_S_STREAM_TRUNCATED = HResultCode("NS_S_STREAM_TRUNCATED", 0x000D0002, "The stream was purposefully stopped before completion.")

# ============================================================
# Generic and COM runtime failures
# ============================================================

E_PENDING = HResultCode("E_PENDING", 0x8000000A, "The data necessary to complete this operation is not yet available.")
E_BOUNDS = HResultCode("E_BOUNDS", 0x8000000B, "The operation attempted to access data outside the valid range.")
E_CHANGED_STATE = HResultCode("E_CHANGED_STATE", 0x8000000C, "A concurrent or interleaved operation changed the state of the object, invalidating this operation.")
E_ILLEGAL_STATE_CHANGE = HResultCode("E_ILLEGAL_STATE_CHANGE", 0x8000000D, "An illegal state change was requested.")
E_ILLEGAL_METHOD_CALL = HResultCode("E_ILLEGAL_METHOD_CALL", 0x8000000E, "A method was called at an unexpected time.")
RO_E_METADATA_NAME_NOT_FOUND = HResultCode("RO_E_METADATA_NAME_NOT_FOUND", 0x8000000F, "Typename or namespace was not found in metadata file.")
RO_E_METADATA_NAME_IS_NAMESPACE = HResultCode("RO_E_METADATA_NAME_IS_NAMESPACE", 0x80000010, "Name is an existing namespace rather than a typename.")
RO_E_METADATA_INVALID_TYPE_FORMAT = HResultCode("RO_E_METADATA_INVALID_TYPE_FORMAT", 0x80000011, "Typename has an invalid format.")
RO_E_INVALID_METADATA_FILE = HResultCode("RO_E_INVALID_METADATA_FILE", 0x80000012, "Metadata file is invalid or corrupted.")
RO_E_CLOSED = HResultCode("RO_E_CLOSED", 0x80000013, "The object has been closed.")
RO_E_EXCLUSIVE_WRITE = HResultCode("RO_E_EXCLUSIVE_WRITE", 0x80000014, "Only one thread may access the object during a write operation.")
RO_E_CHANGE_NOTIFICATION_IN_PROGRESS = HResultCode("RO_E_CHANGE_NOTIFICATION_IN_PROGRESS", 0x80000015, "Operation is prohibited during change notification.")
RO_E_ERROR_STRING_NOT_FOUND = HResultCode("RO_E_ERROR_STRING_NOT_FOUND", 0x80000016, "The text associated with this error code could not be found.")
E_STRING_NOT_NULL_TERMINATED = HResultCode("E_STRING_NOT_NULL_TERMINATED", 0x80000017, "String not null terminated.")
E_ILLEGAL_DELEGATE_ASSIGNMENT = HResultCode("E_ILLEGAL_DELEGATE_ASSIGNMENT", 0x80000018, "A delegate was assigned when not allowed.")
E_ASYNC_OPERATION_NOT_STARTED = HResultCode("E_ASYNC_OPERATION_NOT_STARTED", 0x80000019, "An async operation was not properly started.")
E_APPLICATION_EXITING = HResultCode("E_APPLICATION_EXITING", 0x8000001A, "The application is exiting and cannot service this request.")
E_APPLICATION_VIEW_EXITING = HResultCode("E_APPLICATION_VIEW_EXITING", 0x8000001B, "The application view is exiting and cannot service this request.")
RO_E_MUST_BE_AGILE = HResultCode("RO_E_MUST_BE_AGILE", 0x8000001C, "The object must support the IAgileObject interface.")
RO_E_UNSUPPORTED_FROM_MTA = HResultCode("RO_E_UNSUPPORTED_FROM_MTA", 0x8000001D, "Activating a single-threaded class from MTA is not supported.")
RO_E_COMMITTED = HResultCode("RO_E_COMMITTED", 0x8000001E, "The object has been committed.")
E_NOTIMPL = HResultCode("E_NOTIMPL", 0x80004001, "Not implemented.")
E_NOINTERFACE = HResultCode("E_NOINTERFACE", 0x80004002, "No such interface supported.")
E_POINTER = HResultCode("E_POINTER", 0x80004003, "Invalid pointer.")
E_ABORT = HResultCode("E_ABORT", 0x80004004, "Operation aborted.")
E_FAIL = HResultCode("E_FAIL", 0x80004005, "Unspecified error.")
CO_E_INIT_TLS = HResultCode("CO_E_INIT_TLS", 0x80004006, "Thread local storage failure.")
CO_E_INIT_SHARED_ALLOCATOR = HResultCode("CO_E_INIT_SHARED_ALLOCATOR", 0x80004007, "Get shared memory allocator failure.")
CO_E_INIT_MEMORY_ALLOCATOR = HResultCode("CO_E_INIT_MEMORY_ALLOCATOR", 0x80004008, "Get memory allocator failure.")
CO_E_INIT_CLASS_CACHE = HResultCode("CO_E_INIT_CLASS_CACHE", 0x80004009, "Unable to initialize class cache.")
CO_E_INIT_RPC_CHANNEL = HResultCode("CO_E_INIT_RPC_CHANNEL", 0x8000400A, "Unable to initialize remote procedure call (RPC) services.")
CO_E_INIT_TLS_SET_CHANNEL_CONTROL = HResultCode("CO_E_INIT_TLS_SET_CHANNEL_CONTROL", 0x8000400B, "Cannot set thread local storage channel control.")
CO_E_INIT_TLS_CHANNEL_CONTROL = HResultCode("CO_E_INIT_TLS_CHANNEL_CONTROL", 0x8000400C, "Could not allocate thread local storage channel control.")
CO_E_INIT_UNACCEPTED_USER_ALLOCATOR = HResultCode("CO_E_INIT_UNACCEPTED_USER_ALLOCATOR", 0x8000400D, "The user-supplied memory allocator is unacceptable.")
CO_E_INIT_SCM_MUTEX_EXISTS = HResultCode("CO_E_INIT_SCM_MUTEX_EXISTS", 0x8000400E, "The OLE service mutex already exists.")
CO_E_INIT_SCM_FILE_MAPPING_EXISTS = HResultCode("CO_E_INIT_SCM_FILE_MAPPING_EXISTS", 0x8000400F, "The OLE service file mapping already exists.")
CO_E_INIT_SCM_MAP_VIEW_OF_FILE = HResultCode("CO_E_INIT_SCM_MAP_VIEW_OF_FILE", 0x80004010, "Unable to map view of file for OLE service.")
CO_E_INIT_SCM_EXEC_FAILURE = HResultCode("CO_E_INIT_SCM_EXEC_FAILURE", 0x80004011, "Failure attempting to launch OLE service.")
CO_E_INIT_ONLY_SINGLE_THREADED = HResultCode("CO_E_INIT_ONLY_SINGLE_THREADED", 0x80004012, "There was an attempt to call CoInitialize a second time while single-threaded.")
CO_E_CANT_REMOTE = HResultCode("CO_E_CANT_REMOTE", 0x80004013, "A Remote activation was necessary but was not allowed.")
CO_E_BAD_SERVER_NAME = HResultCode("CO_E_BAD_SERVER_NAME", 0x80004014, "A Remote activation was necessary, but the server name provided was invalid.")
CO_E_WRONG_SERVER_IDENTITY = HResultCode("CO_E_WRONG_SERVER_IDENTITY", 0x80004015, "The class is configured to run as a security ID different from the caller.")
CO_E_OLE1DDE_DISABLED = HResultCode("CO_E_OLE1DDE_DISABLED", 0x80004016, "Use of OLE1 services requiring Dynamic Data Exchange (DDE) Windows is disabled.")
CO_E_RUNAS_SYNTAX = HResultCode("CO_E_RUNAS_SYNTAX", 0x80004017, "A RunAs specification must be <domain name>\\<user name> or simply <user name>.")
CO_E_CREATEPROCESS_FAILURE = HResultCode("CO_E_CREATEPROCESS_FAILURE", 0x80004018, "The server process could not be started. The path name might be incorrect.")
CO_E_RUNAS_CREATEPROCESS_FAILURE = HResultCode("CO_E_RUNAS_CREATEPROCESS_FAILURE", 0x80004019, "The server process could not be started as the configured identity. The path name might be incorrect or unavailable.")
CO_E_RUNAS_LOGON_FAILURE = HResultCode("CO_E_RUNAS_LOGON_FAILURE", 0x8000401A, "The server process could not be started because the configured identity is incorrect. Check the user name and password.")
CO_E_LAUNCH_PERMSSION_DENIED = HResultCode("CO_E_LAUNCH_PERMSSION_DENIED", 0x8000401B, "The client is not allowed to launch this server.")
CO_E_START_SERVICE_FAILURE = HResultCode("CO_E_START_SERVICE_FAILURE", 0x8000401C, "The service providing this server could not be started.")
CO_E_REMOTE_COMMUNICATION_FAILURE = HResultCode("CO_E_REMOTE_COMMUNICATION_FAILURE", 0x8000401D, "This computer was unable to communicate with the computer providing the server.")
CO_E_SERVER_START_TIMEOUT = HResultCode("CO_E_SERVER_START_TIMEOUT", 0x8000401E, "The server did not respond after being launched.")
CO_E_CLSREG_INCONSISTENT = HResultCode("CO_E_CLSREG_INCONSISTENT", 0x8000401F, "The registration information for this server is inconsistent or incomplete.")
CO_E_IIDREG_INCONSISTENT = HResultCode("CO_E_IIDREG_INCONSISTENT", 0x80004020, "The registration information for this interface is inconsistent or incomplete.")
CO_E_NOT_SUPPORTED = HResultCode("CO_E_NOT_SUPPORTED", 0x80004021, "The operation attempted is not supported.")
CO_E_RELOAD_DLL = HResultCode("CO_E_RELOAD_DLL", 0x80004022, "A DLL must be loaded.")
CO_E_MSI_ERROR = HResultCode("CO_E_MSI_ERROR", 0x80004023, "A Microsoft Software Installer error was encountered.")
CO_E_ATTEMPT_TO_CREATE_OUTSIDE_CLIENT_CONTEXT = HResultCode("CO_E_ATTEMPT_TO_CREATE_OUTSIDE_CLIENT_CONTEXT", 0x80004024, "The specified activation could not occur in the client context as specified.")
CO_E_SERVER_PAUSED = HResultCode("CO_E_SERVER_PAUSED", 0x80004025, "Activations on the server are paused.")
CO_E_SERVER_NOT_PAUSED = HResultCode("CO_E_SERVER_NOT_PAUSED", 0x80004026, "Activations on the server are not paused.")
CO_E_CLASS_DISABLED = HResultCode("CO_E_CLASS_DISABLED", 0x80004027, "The component or application containing the component has been disabled.")
CO_E_CLRNOTAVAILABLE = HResultCode("CO_E_CLRNOTAVAILABLE", 0x80004028, "The common language runtime is not available.")
CO_E_ASYNC_WORK_REJECTED = HResultCode("CO_E_ASYNC_WORK_REJECTED", 0x80004029, "The thread-pool rejected the submitted asynchronous work.")
CO_E_SERVER_INIT_TIMEOUT = HResultCode("CO_E_SERVER_INIT_TIMEOUT", 0x8000402A, "The server started, but it did not finish initializing in a timely fashion.")
CO_E_NO_SECCTX_IN_ACTIVATE = HResultCode("CO_E_NO_SECCTX_IN_ACTIVATE", 0x8000402B, "Unable to complete the call because there is no COM+ security context inside IObjectControl.Activate.")
CO_E_TRACKER_CONFIG = HResultCode("CO_E_TRACKER_CONFIG", 0x80004030, "The provided tracker configuration is invalid.")
CO_E_THREADPOOL_CONFIG = HResultCode("CO_E_THREADPOOL_CONFIG", 0x80004031, "The provided thread pool configuration is invalid.")
CO_E_SXS_CONFIG = HResultCode("CO_E_SXS_CONFIG", 0x80004032, "The provided side-by-side configuration is invalid.")
CO_E_MALFORMED_SPN = HResultCode("CO_E_MALFORMED_SPN", 0x80004033, "The server principal name (SPN) obtained during security negotiation is malformed.")
E_UNEXPECTED = HResultCode("E_UNEXPECTED", 0x8000FFFF, "Catastrophic failure.")

# ============================================================
# FACILITY_RPC
# ============================================================

RPC_E_CALL_REJECTED = HResultCode("RPC_E_CALL_REJECTED", 0x80010001, "Call was rejected by callee.")
RPC_E_CALL_CANCELED = HResultCode("RPC_E_CALL_CANCELED", 0x80010002, "Call was canceled by the message filter.")
RPC_E_CANTPOST_INSENDCALL = HResultCode("RPC_E_CANTPOST_INSENDCALL", 0x80010003, "The caller is dispatching an intertask SendMessage call and cannot call out via PostMessage.")
RPC_E_CANTCALLOUT_INASYNCCALL = HResultCode("RPC_E_CANTCALLOUT_INASYNCCALL", 0x80010004, "The caller is dispatching an asynchronous call and cannot make an outgoing call on behalf of this call.")
RPC_E_CANTCALLOUT_INEXTERNALCALL = HResultCode("RPC_E_CANTCALLOUT_INEXTERNALCALL", 0x80010005, "It is illegal to call out while inside message filter.")
RPC_E_CONNECTION_TERMINATED = HResultCode("RPC_E_CONNECTION_TERMINATED", 0x80010006, "The connection terminated or is in a bogus state and can no longer be used. Other connections are still valid.")
RPC_E_SERVER_DIED = HResultCode("RPC_E_SERVER_DIED", 0x80010007, "The callee (the server, not the server application) is not available and disappeared; all connections are invalid. The call might have executed.")
RPC_E_CLIENT_DIED = HResultCode("RPC_E_CLIENT_DIED", 0x80010008, "The caller (client) disappeared while the callee (server) was processing a call.")
RPC_E_INVALID_DATAPACKET = HResultCode("RPC_E_INVALID_DATAPACKET", 0x80010009, "The data packet with the marshaled parameter data is incorrect.")
RPC_E_CANTTRANSMIT_CALL = HResultCode("RPC_E_CANTTRANSMIT_CALL", 0x8001000A, "The call was not transmitted properly; the message queue was full and was not emptied after yielding.")
RPC_E_CLIENT_CANTMARSHAL_DATA = HResultCode("RPC_E_CLIENT_CANTMARSHAL_DATA", 0x8001000B, "The client RPC caller cannot marshal the parameter data due to errors (such as low memory).")
RPC_E_CLIENT_CANTUNMARSHAL_DATA = HResultCode("RPC_E_CLIENT_CANTUNMARSHAL_DATA", 0x8001000C, "The client RPC caller cannot unmarshal the return data due to errors (such as low memory).")
RPC_E_SERVER_CANTMARSHAL_DATA = HResultCode("RPC_E_SERVER_CANTMARSHAL_DATA", 0x8001000D, "The server RPC callee cannot marshal the return data due to errors (such as low memory).")
RPC_E_SERVER_CANTUNMARSHAL_DATA = HResultCode("RPC_E_SERVER_CANTUNMARSHAL_DATA", 0x8001000E, "The server RPC callee cannot unmarshal the parameter data due to errors (such as low memory).")
RPC_E_INVALID_DATA = HResultCode("RPC_E_INVALID_DATA", 0x8001000F, "Received data is invalid. The data might be server or client data.")
RPC_E_INVALID_PARAMETER = HResultCode("RPC_E_INVALID_PARAMETER", 0x80010010, "A particular parameter is invalid and cannot be (un)marshaled.")
RPC_E_CANTCALLOUT_AGAIN = HResultCode("RPC_E_CANTCALLOUT_AGAIN", 0x80010011, "There is no second outgoing call on same channel in DDE conversation.")
RPC_E_SERVER_DIED_DNE = HResultCode("RPC_E_SERVER_DIED_DNE", 0x80010012, "The callee (the server, not the server application) is not available and disappeared; all connections are invalid. The call did not execute.")
RPC_E_SYS_CALL_FAILED = HResultCode("RPC_E_SYS_CALL_FAILED", 0x80010100, "System call failed.")
RPC_E_OUT_OF_RESOURCES = HResultCode("RPC_E_OUT_OF_RESOURCES", 0x80010101, "Could not allocate some required resource (such as memory or events)")
RPC_E_ATTEMPTED_MULTITHREAD = HResultCode("RPC_E_ATTEMPTED_MULTITHREAD", 0x80010102, "Attempted to make calls on more than one thread in single-threaded mode.")
RPC_E_NOT_REGISTERED = HResultCode("RPC_E_NOT_REGISTERED", 0x80010103, "The requested interface is not registered on the server object.")
RPC_E_FAULT = HResultCode("RPC_E_FAULT", 0x80010104, "RPC could not call the server or could not return the results of calling the server.")
RPC_E_SERVERFAULT = HResultCode("RPC_E_SERVERFAULT", 0x80010105, "The server threw an exception.")
RPC_E_CHANGED_MODE = HResultCode("RPC_E_CHANGED_MODE", 0x80010106, "Cannot change thread mode after it is set.")
RPC_E_INVALIDMETHOD = HResultCode("RPC_E_INVALIDMETHOD", 0x80010107, "The method called does not exist on the server.")
RPC_E_DISCONNECTED = HResultCode("RPC_E_DISCONNECTED", 0x80010108, "The object invoked has disconnected from its clients.")
RPC_E_RETRY = HResultCode("RPC_E_RETRY", 0x80010109, "The object invoked chose not to process the call now. Try again later.")
RPC_E_SERVERCALL_RETRYLATER = HResultCode("RPC_E_SERVERCALL_RETRYLATER", 0x8001010A, "The message filter indicated that the application is busy.")
RPC_E_SERVERCALL_REJECTED = HResultCode("RPC_E_SERVERCALL_REJECTED", 0x8001010B, "The message filter rejected the call.")
RPC_E_INVALID_CALLDATA = HResultCode("RPC_E_INVALID_CALLDATA", 0x8001010C, "A call control interface was called with invalid data.")
RPC_E_CANTCALLOUT_ININPUTSYNCCALL = HResultCode("RPC_E_CANTCALLOUT_ININPUTSYNCCALL", 0x8001010D, "An outgoing call cannot be made because the application is dispatching an input-synchronous call.")
RPC_E_WRONG_THREAD = HResultCode("RPC_E_WRONG_THREAD", 0x8001010E, "The application called an interface that was marshaled for a different thread.")
RPC_E_THREAD_NOT_INIT = HResultCode("RPC_E_THREAD_NOT_INIT", 0x8001010F, "CoInitialize has not been called on the current thread.")
RPC_E_VERSION_MISMATCH = HResultCode("RPC_E_VERSION_MISMATCH", 0x80010110, "The version of OLE on the client and server machines does not match.")
RPC_E_INVALID_HEADER = HResultCode("RPC_E_INVALID_HEADER", 0x80010111, "OLE received a packet with an invalid header.")
RPC_E_INVALID_EXTENSION = HResultCode("RPC_E_INVALID_EXTENSION", 0x80010112, "OLE received a packet with an invalid extension.")
RPC_E_INVALID_IPID = HResultCode("RPC_E_INVALID_IPID", 0x80010113, "The requested object or interface does not exist.")
RPC_E_INVALID_OBJECT = HResultCode("RPC_E_INVALID_OBJECT", 0x80010114, "The requested object does not exist.")
RPC_S_CALLPENDING = HResultCode("RPC_S_CALLPENDING", 0x80010115, "OLE has sent a request and is waiting for a reply.")
RPC_S_WAITONTIMER = HResultCode("RPC_S_WAITONTIMER", 0x80010116, "OLE is waiting before retrying a request.")
RPC_E_CALL_COMPLETE = HResultCode("RPC_E_CALL_COMPLETE", 0x80010117, "Call context cannot be accessed after call completed.")
RPC_E_UNSECURE_CALL = HResultCode("RPC_E_UNSECURE_CALL", 0x80010118, "Impersonate on unsecure calls is not supported.")
RPC_E_TOO_LATE = HResultCode("RPC_E_TOO_LATE", 0x80010119, "Security must be initialized before any interfaces are marshaled or unmarshaled. It cannot be changed once initialized.")
RPC_E_NO_GOOD_SECURITY_PACKAGES = HResultCode("RPC_E_NO_GOOD_SECURITY_PACKAGES", 0x8001011A, "No security packages are installed on this machine, the user is not logged on, or there are no compatible security packages between the client and server.")
RPC_E_ACCESS_DENIED = HResultCode("RPC_E_ACCESS_DENIED", 0x8001011B, "Access is denied.")
RPC_E_REMOTE_DISABLED = HResultCode("RPC_E_REMOTE_DISABLED", 0x8001011C, "Remote calls are not allowed for this process.")
RPC_E_INVALID_OBJREF = HResultCode("RPC_E_INVALID_OBJREF", 0x8001011D, "The marshaled interface data packet (OBJREF) has an invalid or unknown format.")
RPC_E_NO_CONTEXT = HResultCode("RPC_E_NO_CONTEXT", 0x8001011E, "No context is associated with this call. This happens for some custom marshaled calls and on the client side of the call.")
RPC_E_TIMEOUT = HResultCode("RPC_E_TIMEOUT", 0x8001011F, "This operation returned because the time-out period expired.")
RPC_E_NO_SYNC = HResultCode("RPC_E_NO_SYNC", 0x80010120, "There are no synchronize objects to wait on.")
RPC_E_FULLSIC_REQUIRED = HResultCode("RPC_E_FULLSIC_REQUIRED", 0x80010121, "Full subject issuer chain Secure Sockets Layer (SSL) principal name expected from the server.")
RPC_E_INVALID_STD_NAME = HResultCode("RPC_E_INVALID_STD_NAME", 0x80010122, "Principal name is not a valid Microsoft standard (msstd) name.")
CO_E_FAILEDTOIMPERSONATE = HResultCode("CO_E_FAILEDTOIMPERSONATE", 0x80010123, "Unable to impersonate DCOM client.")
CO_E_FAILEDTOGETSECCTX = HResultCode("CO_E_FAILEDTOGETSECCTX", 0x80010124, "Unable to obtain server's security context.")
CO_E_FAILEDTOOPENTHREADTOKEN = HResultCode("CO_E_FAILEDTOOPENTHREADTOKEN", 0x80010125, "Unable to open the access token of the current thread.")
CO_E_FAILEDTOGETTOKENINFO = HResultCode("CO_E_FAILEDTOGETTOKENINFO", 0x80010126, "Unable to obtain user information from an access token.")
CO_E_TRUSTEEDOESNTMATCHCLIENT = HResultCode("CO_E_TRUSTEEDOESNTMATCHCLIENT", 0x80010127, "The client who called IAccessControl::IsAccessPermitted was not the trustee provided to the method.")
CO_E_FAILEDTOQUERYCLIENTBLANKET = HResultCode("CO_E_FAILEDTOQUERYCLIENTBLANKET", 0x80010128, "Unable to obtain the client's security blanket.")
CO_E_FAILEDTOSETDACL = HResultCode("CO_E_FAILEDTOSETDACL", 0x80010129, "Unable to set a discretionary access control list (ACL) into a security descriptor.")
CO_E_ACCESSCHECKFAILED = HResultCode("CO_E_ACCESSCHECKFAILED", 0x8001012A, "The system function AccessCheck returned false.")
CO_E_NETACCESSAPIFAILED = HResultCode("CO_E_NETACCESSAPIFAILED", 0x8001012B, "Either NetAccessDel or NetAccessAdd returned an error code.")
CO_E_WRONGTRUSTEENAMESYNTAX = HResultCode("CO_E_WRONGTRUSTEENAMESYNTAX", 0x8001012C, "One of the trustee strings provided by the user did not conform to the <Domain>\\<Name> syntax and it was not the \"*\" string.")
CO_E_INVALIDSID = HResultCode("CO_E_INVALIDSID", 0x8001012D, "One of the security identifiers provided by the user was invalid.")
CO_E_CONVERSIONFAILED = HResultCode("CO_E_CONVERSIONFAILED", 0x8001012E, "Unable to convert a wide character trustee string to a multiple-byte trustee string.")
CO_E_NOMATCHINGSIDFOUND = HResultCode("CO_E_NOMATCHINGSIDFOUND", 0x8001012F, "Unable to find a security identifier that corresponds to a trustee string provided by the user.")
CO_E_LOOKUPACCSIDFAILED = HResultCode("CO_E_LOOKUPACCSIDFAILED", 0x80010130, "The system function LookupAccountSID failed.")
CO_E_NOMATCHINGNAMEFOUND = HResultCode("CO_E_NOMATCHINGNAMEFOUND", 0x80010131, "Unable to find a trustee name that corresponds to a security identifier provided by the user.")
CO_E_LOOKUPACCNAMEFAILED = HResultCode("CO_E_LOOKUPACCNAMEFAILED", 0x80010132, "The system function LookupAccountName failed.")
CO_E_SETSERLHNDLFAILED = HResultCode("CO_E_SETSERLHNDLFAILED", 0x80010133, "Unable to set or reset a serialization handle.")
CO_E_FAILEDTOGETWINDIR = HResultCode("CO_E_FAILEDTOGETWINDIR", 0x80010134, "Unable to obtain the Windows directory.")
CO_E_PATHTOOLONG = HResultCode("CO_E_PATHTOOLONG", 0x80010135, "Path too long.")
CO_E_FAILEDTOGENUUID = HResultCode("CO_E_FAILEDTOGENUUID", 0x80010136, "Unable to generate a UUID.")
CO_E_FAILEDTOCREATEFILE = HResultCode("CO_E_FAILEDTOCREATEFILE", 0x80010137, "Unable to create file.")
CO_E_FAILEDTOCLOSEHANDLE = HResultCode("CO_E_FAILEDTOCLOSEHANDLE", 0x80010138, "Unable to close a serialization handle or a file handle.")
CO_E_EXCEEDSYSACLLIMIT = HResultCode("CO_E_EXCEEDSYSACLLIMIT", 0x80010139, "The number of access control entries (ACEs) in an ACL exceeds the system limit.")
CO_E_ACESINWRONGORDER = HResultCode("CO_E_ACESINWRONGORDER", 0x8001013A, "Not all the DENY_ACCESS ACEs are arranged in front of the GRANT_ACCESS ACEs in the stream.")
CO_E_INCOMPATIBLESTREAMVERSION = HResultCode("CO_E_INCOMPATIBLESTREAMVERSION", 0x8001013B, "The version of ACL format in the stream is not supported by this implementation of IAccessControl.")
CO_E_FAILEDTOOPENPROCESSTOKEN = HResultCode("CO_E_FAILEDTOOPENPROCESSTOKEN", 0x8001013C, "Unable to open the access token of the server process.")
CO_E_DECODEFAILED = HResultCode("CO_E_DECODEFAILED", 0x8001013D, "Unable to decode the ACL in the stream provided by the user.")
CO_E_ACNOTINITIALIZED = HResultCode("CO_E_ACNOTINITIALIZED", 0x8001013F, "The COM IAccessControl object is not initialized.")
CO_E_CANCEL_DISABLED = HResultCode("CO_E_CANCEL_DISABLED", 0x80010140, "Call Cancellation is disabled.")
RPC_E_UNEXPECTED = HResultCode("RPC_E_UNEXPECTED", 0x8001FFFF, "An internal error occurred.")

# ============================================================
# FACILITY_DISPATCH
# ============================================================

DISP_E_UNKNOWNINTERFACE = HResultCode("DISP_E_UNKNOWNINTERFACE", 0x80020001, "Unknown interface.")
DISP_E_MEMBERNOTFOUND = HResultCode("DISP_E_MEMBERNOTFOUND", 0x80020003, "Member not found.")
DISP_E_PARAMNOTFOUND = HResultCode("DISP_E_PARAMNOTFOUND", 0x80020004, "Parameter not found.")
DISP_E_TYPEMISMATCH = HResultCode("DISP_E_TYPEMISMATCH", 0x80020005, "Type mismatch.")
DISP_E_UNKNOWNNAME = HResultCode("DISP_E_UNKNOWNNAME", 0x80020006, "Unknown name.")
DISP_E_NONAMEDARGS = HResultCode("DISP_E_NONAMEDARGS", 0x80020007, "No named arguments.")
DISP_E_BADVARTYPE = HResultCode("DISP_E_BADVARTYPE", 0x80020008, "Bad variable type.")
DISP_E_EXCEPTION = HResultCode("DISP_E_EXCEPTION", 0x80020009, "Exception occurred.")
DISP_E_OVERFLOW = HResultCode("DISP_E_OVERFLOW", 0x8002000A, "Out of present range.")
DISP_E_BADINDEX = HResultCode("DISP_E_BADINDEX", 0x8002000B, "Invalid index.")
DISP_E_UNKNOWNLCID = HResultCode("DISP_E_UNKNOWNLCID", 0x8002000C, "Unknown language.")
DISP_E_ARRAYISLOCKED = HResultCode("DISP_E_ARRAYISLOCKED", 0x8002000D, "Memory is locked.")
DISP_E_BADPARAMCOUNT = HResultCode("DISP_E_BADPARAMCOUNT", 0x8002000E, "Invalid number of parameters.")
DISP_E_PARAMNOTOPTIONAL = HResultCode("DISP_E_PARAMNOTOPTIONAL", 0x8002000F, "Parameter not optional.")
DISP_E_BADCALLEE = HResultCode("DISP_E_BADCALLEE", 0x80020010, "Invalid callee.")
DISP_E_NOTACOLLECTION = HResultCode("DISP_E_NOTACOLLECTION", 0x80020011, "Does not support a collection.")
DISP_E_DIVBYZERO = HResultCode("DISP_E_DIVBYZERO", 0x80020012, "Division by zero.")
DISP_E_BUFFERTOOSMALL = HResultCode("DISP_E_BUFFERTOOSMALL", 0x80020013, "Buffer too small.")
TYPE_E_BUFFERTOOSMALL = HResultCode("TYPE_E_BUFFERTOOSMALL", 0x80028016, "Buffer too small.")
TYPE_E_FIELDNOTFOUND = HResultCode("TYPE_E_FIELDNOTFOUND", 0x80028017, "Field name not defined in the record.")
TYPE_E_INVDATAREAD = HResultCode("TYPE_E_INVDATAREAD", 0x80028018, "Old format or invalid type library.")
TYPE_E_UNSUPFORMAT = HResultCode("TYPE_E_UNSUPFORMAT", 0x80028019, "Old format or invalid type library.")
TYPE_E_REGISTRYACCESS = HResultCode("TYPE_E_REGISTRYACCESS", 0x8002801C, "Error accessing the OLE registry.")
TYPE_E_LIBNOTREGISTERED = HResultCode("TYPE_E_LIBNOTREGISTERED", 0x8002801D, "Library not registered.")
TYPE_E_UNDEFINEDTYPE = HResultCode("TYPE_E_UNDEFINEDTYPE", 0x80028027, "Bound to unknown type.")
TYPE_E_QUALIFIEDNAMEDISALLOWED = HResultCode("TYPE_E_QUALIFIEDNAMEDISALLOWED", 0x80028028, "Qualified name disallowed.")
TYPE_E_INVALIDSTATE = HResultCode("TYPE_E_INVALIDSTATE", 0x80028029, "Invalid forward reference, or reference to uncompiled type.")
TYPE_E_WRONGTYPEKIND = HResultCode("TYPE_E_WRONGTYPEKIND", 0x8002802A, "Type mismatch.")
TYPE_E_ELEMENTNOTFOUND = HResultCode("TYPE_E_ELEMENTNOTFOUND", 0x8002802B, "Element not found.")
TYPE_E_AMBIGUOUSNAME = HResultCode("TYPE_E_AMBIGUOUSNAME", 0x8002802C, "Ambiguous name.")
TYPE_E_NAMECONFLICT = HResultCode("TYPE_E_NAMECONFLICT", 0x8002802D, "Name already exists in the library.")
TYPE_E_UNKNOWNLCID = HResultCode("TYPE_E_UNKNOWNLCID", 0x8002802E, "Unknown language code identifier (LCID).")
TYPE_E_DLLFUNCTIONNOTFOUND = HResultCode("TYPE_E_DLLFUNCTIONNOTFOUND", 0x8002802F, "Function not defined in specified DLL.")
TYPE_E_BADMODULEKIND = HResultCode("TYPE_E_BADMODULEKIND", 0x800288BD, "Wrong module kind for the operation.")
TYPE_E_SIZETOOBIG = HResultCode("TYPE_E_SIZETOOBIG", 0x800288C5, "Size cannot exceed 64 KB.")
TYPE_E_DUPLICATEID = HResultCode("TYPE_E_DUPLICATEID", 0x800288C6, "Duplicate ID in inheritance hierarchy.")
TYPE_E_INVALIDID = HResultCode("TYPE_E_INVALIDID", 0x800288CF, "Incorrect inheritance depth in standard OLE hmember.")
TYPE_E_TYPEMISMATCH = HResultCode("TYPE_E_TYPEMISMATCH", 0x80028CA0, "Type mismatch.")
TYPE_E_OUTOFBOUNDS = HResultCode("TYPE_E_OUTOFBOUNDS", 0x80028CA1, "Invalid number of arguments.")
TYPE_E_IOERROR = HResultCode("TYPE_E_IOERROR", 0x80028CA2, "I/O error.")
TYPE_E_CANTCREATETMPFILE = HResultCode("TYPE_E_CANTCREATETMPFILE", 0x80028CA3, "Error creating unique .tmp file.")
TYPE_E_CANTLOADLIBRARY = HResultCode("TYPE_E_CANTLOADLIBRARY", 0x80029C4A, "Error loading type library or DLL.")
TYPE_E_INCONSISTENTPROPFUNCS = HResultCode("TYPE_E_INCONSISTENTPROPFUNCS", 0x80029C83, "Inconsistent property functions.")
TYPE_E_CIRCULARTYPE = HResultCode("TYPE_E_CIRCULARTYPE", 0x80029C84, "Circular dependency between types and modules.")

# ============================================================
# FACILITY_STORAGE
# ============================================================

STG_E_INVALIDFUNCTION = HResultCode("STG_E_INVALIDFUNCTION", 0x80030001, "Unable to perform requested operation.")
STG_E_FILENOTFOUND = HResultCode("STG_E_FILENOTFOUND", 0x80030002, "%1 could not be found.")
STG_E_PATHNOTFOUND = HResultCode("STG_E_PATHNOTFOUND", 0x80030003, "The path %1 could not be found.")
STG_E_TOOMANYOPENFILES = HResultCode("STG_E_TOOMANYOPENFILES", 0x80030004, "There are insufficient resources to open another file.")
STG_E_ACCESSDENIED = HResultCode("STG_E_ACCESSDENIED", 0x80030005, "Access denied.")
STG_E_INVALIDHANDLE = HResultCode("STG_E_INVALIDHANDLE", 0x80030006, "Attempted an operation on an invalid object.")
STG_E_INSUFFICIENTMEMORY = HResultCode("STG_E_INSUFFICIENTMEMORY", 0x80030008, "There is insufficient memory available to complete operation.")
STG_E_INVALIDPOINTER = HResultCode("STG_E_INVALIDPOINTER", 0x80030009, "Invalid pointer error.")
STG_E_NOMOREFILES = HResultCode("STG_E_NOMOREFILES", 0x80030012, "There are no more entries to return.")
STG_E_DISKISWRITEPROTECTED = HResultCode("STG_E_DISKISWRITEPROTECTED", 0x80030013, "Disk is write-protected.")
STG_E_SEEKERROR = HResultCode("STG_E_SEEKERROR", 0x80030019, "An error occurred during a seek operation.")
STG_E_WRITEFAULT = HResultCode("STG_E_WRITEFAULT", 0x8003001D, "A disk error occurred during a write operation.")
STG_E_READFAULT = HResultCode("STG_E_READFAULT", 0x8003001E, "A disk error occurred during a read operation.")
STG_E_SHAREVIOLATION = HResultCode("STG_E_SHAREVIOLATION", 0x80030020, "A share violation has occurred.")
STG_E_LOCKVIOLATION = HResultCode("STG_E_LOCKVIOLATION", 0x80030021, "A lock violation has occurred.")
STG_E_FILEALREADYEXISTS = HResultCode("STG_E_FILEALREADYEXISTS", 0x80030050, "%1 already exists.")
STG_E_INVALIDPARAMETER = HResultCode("STG_E_INVALIDPARAMETER", 0x80030057, "Invalid parameter error.")
STG_E_MEDIUMFULL = HResultCode("STG_E_MEDIUMFULL", 0x80030070, "There is insufficient disk space to complete operation.")
STG_E_PROPSETMISMATCHED = HResultCode("STG_E_PROPSETMISMATCHED", 0x800300F0, "Illegal write of non-simple property to simple property set.")
STG_E_ABNORMALAPIEXIT = HResultCode("STG_E_ABNORMALAPIEXIT", 0x800300FA, "An application programming interface (API) call exited abnormally.")
STG_E_INVALIDHEADER = HResultCode("STG_E_INVALIDHEADER", 0x800300FB, "The file %1 is not a valid compound file.")
STG_E_INVALIDNAME = HResultCode("STG_E_INVALIDNAME", 0x800300FC, "The name %1 is not valid.")
STG_E_UNKNOWN = HResultCode("STG_E_UNKNOWN", 0x800300FD, "An unexpected error occurred.")
STG_E_UNIMPLEMENTEDFUNCTION = HResultCode("STG_E_UNIMPLEMENTEDFUNCTION", 0x800300FE, "That function is not implemented.")
STG_E_INVALIDFLAG = HResultCode("STG_E_INVALIDFLAG", 0x800300FF, "Invalid flag error.")
STG_E_INUSE = HResultCode("STG_E_INUSE", 0x80030100, "Attempted to use an object that is busy.")
STG_E_NOTCURRENT = HResultCode("STG_E_NOTCURRENT", 0x80030101, "The storage has been changed since the last commit.")
STG_E_REVERTED = HResultCode("STG_E_REVERTED", 0x80030102, "Attempted to use an object that has ceased to exist.")
STG_E_CANTSAVE = HResultCode("STG_E_CANTSAVE", 0x80030103, "Cannot save.")
STG_E_OLDFORMAT = HResultCode("STG_E_OLDFORMAT", 0x80030104, "The compound file %1 was produced with an incompatible version of storage.")
STG_E_OLDDLL = HResultCode("STG_E_OLDDLL", 0x80030105, "The compound file %1 was produced with a newer version of storage.")
STG_E_SHAREREQUIRED = HResultCode("STG_E_SHAREREQUIRED", 0x80030106, "Share.exe or equivalent is required for operation.")
STG_E_NOTFILEBASEDSTORAGE = HResultCode("STG_E_NOTFILEBASEDSTORAGE", 0x80030107, "Illegal operation called on non-file based storage.")
STG_E_EXTANTMARSHALLINGS = HResultCode("STG_E_EXTANTMARSHALLINGS", 0x80030108, "Illegal operation called on object with extant marshalings.")
STG_E_DOCFILECORRUPT = HResultCode("STG_E_DOCFILECORRUPT", 0x80030109, "The docfile has been corrupted.")
STG_E_BADBASEADDRESS = HResultCode("STG_E_BADBASEADDRESS", 0x80030110, "OLE32.DLL has been loaded at the wrong address.")
STG_E_DOCFILETOOLARGE = HResultCode("STG_E_DOCFILETOOLARGE", 0x80030111, "The compound file is too large for the current implementation.")
STG_E_NOTSIMPLEFORMAT = HResultCode("STG_E_NOTSIMPLEFORMAT", 0x80030112, "The compound file was not created with the STGM_SIMPLE flag.")
STG_E_INCOMPLETE = HResultCode("STG_E_INCOMPLETE", 0x80030201, "The file download was aborted abnormally. The file is incomplete.")
STG_E_TERMINATED = HResultCode("STG_E_TERMINATED", 0x80030202, "The file download has been terminated.")
STG_E_STATUS_COPY_PROTECTION_FAILURE = HResultCode("STG_E_STATUS_COPY_PROTECTION_FAILURE", 0x80030305, "Generic Copy Protection Error.")
STG_E_CSS_AUTHENTICATION_FAILURE = HResultCode("STG_E_CSS_AUTHENTICATION_FAILURE", 0x80030306, "Copy Protection Error. DVD CSS Authentication failed.")
STG_E_CSS_KEY_NOT_PRESENT = HResultCode("STG_E_CSS_KEY_NOT_PRESENT", 0x80030307, "Copy Protection Error. The given sector does not have a valid CSS key.")
STG_E_CSS_KEY_NOT_ESTABLISHED = HResultCode("STG_E_CSS_KEY_NOT_ESTABLISHED", 0x80030308, "Copy Protection Error. DVD session key not established.")
STG_E_CSS_SCRAMBLED_SECTOR = HResultCode("STG_E_CSS_SCRAMBLED_SECTOR", 0x80030309, "Copy Protection Error. The read failed because the sector is encrypted.")
STG_E_CSS_REGION_MISMATCH = HResultCode("STG_E_CSS_REGION_MISMATCH", 0x8003030A, "Copy Protection Error. The current DVD's region does not correspond to the region setting of the drive.")
STG_E_RESETS_EXHAUSTED = HResultCode("STG_E_RESETS_EXHAUSTED", 0x8003030B, "Copy Protection Error. The drive's region setting might be permanent or the number of user resets has been exhausted.")

# ============================================================
# FACILITY_ITF
# ============================================================

OLE_E_OLEVERB = HResultCode("OLE_E_OLEVERB", 0x80040000, "Invalid OLEVERB structure.")
OLE_E_ADVF = HResultCode("OLE_E_ADVF", 0x80040001, "Invalid advise flags.")
OLE_E_ENUM_NOMORE = HResultCode("OLE_E_ENUM_NOMORE", 0x80040002, "Cannot enumerate any more because the associated data is missing.")
OLE_E_ADVISENOTSUPPORTED = HResultCode("OLE_E_ADVISENOTSUPPORTED", 0x80040003, "This implementation does not take advises.")
OLE_E_NOCONNECTION = HResultCode("OLE_E_NOCONNECTION", 0x80040004, "There is no connection for this connection ID.")
OLE_E_NOTRUNNING = HResultCode("OLE_E_NOTRUNNING", 0x80040005, "Need to run the object to perform this operation.")
OLE_E_NOCACHE = HResultCode("OLE_E_NOCACHE", 0x80040006, "There is no cache to operate on.")
OLE_E_BLANK = HResultCode("OLE_E_BLANK", 0x80040007, "Uninitialized object.")
OLE_E_CLASSDIFF = HResultCode("OLE_E_CLASSDIFF", 0x80040008, "Linked object's source class has changed.")
OLE_E_CANT_GETMONIKER = HResultCode("OLE_E_CANT_GETMONIKER", 0x80040009, "Not able to get the moniker of the object.")
OLE_E_CANT_BINDTOSOURCE = HResultCode("OLE_E_CANT_BINDTOSOURCE", 0x8004000A, "Not able to bind to the source.")
OLE_E_STATIC = HResultCode("OLE_E_STATIC", 0x8004000B, "Object is static; operation not allowed.")
OLE_E_PROMPTSAVECANCELLED = HResultCode("OLE_E_PROMPTSAVECANCELLED", 0x8004000C, "User canceled out of the Save dialog box.")
OLE_E_INVALIDRECT = HResultCode("OLE_E_INVALIDRECT", 0x8004000D, "Invalid rectangle.")
OLE_E_WRONGCOMPOBJ = HResultCode("OLE_E_WRONGCOMPOBJ", 0x8004000E, "compobj.dll is too old for the ole2.dll initialized.")
OLE_E_INVALIDHWND = HResultCode("OLE_E_INVALIDHWND", 0x8004000F, "Invalid window handle.")
OLE_E_NOT_INPLACEACTIVE = HResultCode("OLE_E_NOT_INPLACEACTIVE", 0x80040010, "Object is not in any of the inplace active states.")
OLE_E_CANTCONVERT = HResultCode("OLE_E_CANTCONVERT", 0x80040011, "Not able to convert object.")
OLE_E_NOSTORAGE = HResultCode("OLE_E_NOSTORAGE", 0x80040012, "Not able to perform the operation because object is not given storage yet.")
DV_E_FORMATETC = HResultCode("DV_E_FORMATETC", 0x80040064, "Invalid FORMATETC structure.")
DV_E_DVTARGETDEVICE = HResultCode("DV_E_DVTARGETDEVICE", 0x80040065, "Invalid DVTARGETDEVICE structure.")
DV_E_STGMEDIUM = HResultCode("DV_E_STGMEDIUM", 0x80040066, "Invalid STDGMEDIUM structure.")
DV_E_STATDATA = HResultCode("DV_E_STATDATA", 0x80040067, "Invalid STATDATA structure.")
DV_E_LINDEX = HResultCode("DV_E_LINDEX", 0x80040068, "Invalid lindex.")
DV_E_TYMED = HResultCode("DV_E_TYMED", 0x80040069, "Invalid TYMED structure.")
DV_E_CLIPFORMAT = HResultCode("DV_E_CLIPFORMAT", 0x8004006A, "Invalid clipboard format.")
DV_E_DVASPECT = HResultCode("DV_E_DVASPECT", 0x8004006B, "Invalid aspects.")
DV_E_DVTARGETDEVICE_SIZE = HResultCode("DV_E_DVTARGETDEVICE_SIZE", 0x8004006C, "The tdSize parameter of the DVTARGETDEVICE structure is invalid.")
DV_E_NOIVIEWOBJECT = HResultCode("DV_E_NOIVIEWOBJECT", 0x8004006D, "Object does not support IViewObject interface.")
DRAGDROP_E_NOTREGISTERED = HResultCode("DRAGDROP_E_NOTREGISTERED", 0x80040100, "Trying to revoke a drop target that has not been registered.")
DRAGDROP_E_ALREADYREGISTERED = HResultCode("DRAGDROP_E_ALREADYREGISTERED", 0x80040101, "This window has already been registered as a drop target.")
DRAGDROP_E_INVALIDHWND = HResultCode("DRAGDROP_E_INVALIDHWND", 0x80040102, "Invalid window handle.")
CLASS_E_NOAGGREGATION = HResultCode("CLASS_E_NOAGGREGATION", 0x80040110, "Class does not support aggregation (or class object is remote).")
CLASS_E_CLASSNOTAVAILABLE = HResultCode("CLASS_E_CLASSNOTAVAILABLE", 0x80040111, "ClassFactory cannot supply requested class.")
CLASS_E_NOTLICENSED = HResultCode("CLASS_E_NOTLICENSED", 0x80040112, "Class is not licensed for use.")
VIEW_E_DRAW = HResultCode("VIEW_E_DRAW", 0x80040140, "Error drawing view.")
REGDB_E_READREGDB = HResultCode("REGDB_E_READREGDB", 0x80040150, "Could not read key from registry.")
REGDB_E_WRITEREGDB = HResultCode("REGDB_E_WRITEREGDB", 0x80040151, "Could not write key to registry.")
REGDB_E_KEYMISSING = HResultCode("REGDB_E_KEYMISSING", 0x80040152, "Could not find the key in the registry.")
REGDB_E_INVALIDVALUE = HResultCode("REGDB_E_INVALIDVALUE", 0x80040153, "Invalid value for registry.")
REGDB_E_CLASSNOTREG = HResultCode("REGDB_E_CLASSNOTREG", 0x80040154, "Class not registered.")
REGDB_E_IIDNOTREG = HResultCode("REGDB_E_IIDNOTREG", 0x80040155, "Interface not registered.")
REGDB_E_BADTHREADINGMODEL = HResultCode("REGDB_E_BADTHREADINGMODEL", 0x80040156, "Threading model entry is not valid.")
CAT_E_CATIDNOEXIST = HResultCode("CAT_E_CATIDNOEXIST", 0x80040160, "CATID does not exist.")
CAT_E_NODESCRIPTION = HResultCode("CAT_E_NODESCRIPTION", 0x80040161, "Description not found.")
CS_E_PACKAGE_NOTFOUND = HResultCode("CS_E_PACKAGE_NOTFOUND", 0x80040164, "No package in the software installation data in Active Directory meets this criteria.")
CS_E_NOT_DELETABLE = HResultCode("CS_E_NOT_DELETABLE", 0x80040165, "Deleting this will break the referential integrity of the software installation data in Active Directory.")
CS_E_CLASS_NOTFOUND = HResultCode("CS_E_CLASS_NOTFOUND", 0x80040166, "The CLSID was not found in the software installation data in Active Directory.")
CS_E_INVALID_VERSION = HResultCode("CS_E_INVALID_VERSION", 0x80040167, "The software installation data in Active Directory is corrupt.")
CS_E_NO_CLASSSTORE = HResultCode("CS_E_NO_CLASSSTORE", 0x80040168, "There is no software installation data in Active Directory.")
CS_E_OBJECT_NOTFOUND = HResultCode("CS_E_OBJECT_NOTFOUND", 0x80040169, "There is no software installation data object in Active Directory.")
CS_E_OBJECT_ALREADY_EXISTS = HResultCode("CS_E_OBJECT_ALREADY_EXISTS", 0x8004016A, "The software installation data object in Active Directory already exists.")
CS_E_INVALID_PATH = HResultCode("CS_E_INVALID_PATH", 0x8004016B, "The path to the software installation data in Active Directory is not correct.")
CS_E_NETWORK_ERROR = HResultCode("CS_E_NETWORK_ERROR", 0x8004016C, "A network error interrupted the operation.")
CS_E_ADMIN_LIMIT_EXCEEDED = HResultCode("CS_E_ADMIN_LIMIT_EXCEEDED", 0x8004016D, "The size of this object exceeds the maximum size set by the administrator.")
CS_E_SCHEMA_MISMATCH = HResultCode("CS_E_SCHEMA_MISMATCH", 0x8004016E, "The schema for the software installation data in Active Directory does not match the required schema.")
CS_E_INTERNAL_ERROR = HResultCode("CS_E_INTERNAL_ERROR", 0x8004016F, "An error occurred in the software installation data in Active Directory.")
CACHE_E_NOCACHE_UPDATED = HResultCode("CACHE_E_NOCACHE_UPDATED", 0x80040170, "Cache not updated.")
OLEOBJ_E_NOVERBS = HResultCode("OLEOBJ_E_NOVERBS", 0x80040180, "No verbs for OLE object.")
OLEOBJ_E_INVALIDVERB = HResultCode("OLEOBJ_E_INVALIDVERB", 0x80040181, "Invalid verb for OLE object.")
INPLACE_E_NOTUNDOABLE = HResultCode("INPLACE_E_NOTUNDOABLE", 0x800401A0, "Undo is not available.")
INPLACE_E_NOTOOLSPACE = HResultCode("INPLACE_E_NOTOOLSPACE", 0x800401A1, "Space for tools is not available.")
CONVERT10_E_OLESTREAM_GET = HResultCode("CONVERT10_E_OLESTREAM_GET", 0x800401C0, "OLESTREAM Get method failed.")
CONVERT10_E_OLESTREAM_PUT = HResultCode("CONVERT10_E_OLESTREAM_PUT", 0x800401C1, "OLESTREAM Put method failed.")
CONVERT10_E_OLESTREAM_FMT = HResultCode("CONVERT10_E_OLESTREAM_FMT", 0x800401C2, "Contents of the OLESTREAM not in correct format.")
CONVERT10_E_OLESTREAM_BITMAP_TO_DIB = HResultCode("CONVERT10_E_OLESTREAM_BITMAP_TO_DIB", 0x800401C3, "There was an error in a Windows GDI call while converting the bitmap to a device-independent bitmap (DIB).")
CONVERT10_E_STG_FMT = HResultCode("CONVERT10_E_STG_FMT", 0x800401C4, "Contents of the IStorage not in correct format.")
CONVERT10_E_STG_NO_STD_STREAM = HResultCode("CONVERT10_E_STG_NO_STD_STREAM", 0x800401C5, "Contents of IStorage is missing one of the standard streams.")
CONVERT10_E_STG_DIB_TO_BITMAP = HResultCode("CONVERT10_E_STG_DIB_TO_BITMAP", 0x800401C6, "There was an error in a Windows GDI call while converting the DIB to a bitmap.")
CLIPBRD_E_CANT_OPEN = HResultCode("CLIPBRD_E_CANT_OPEN", 0x800401D0, "OpenClipboard failed.")
CLIPBRD_E_CANT_EMPTY = HResultCode("CLIPBRD_E_CANT_EMPTY", 0x800401D1, "EmptyClipboard failed.")
CLIPBRD_E_CANT_SET = HResultCode("CLIPBRD_E_CANT_SET", 0x800401D2, "SetClipboard failed.")
CLIPBRD_E_BAD_DATA = HResultCode("CLIPBRD_E_BAD_DATA", 0x800401D3, "Data on clipboard is invalid.")
CLIPBRD_E_CANT_CLOSE = HResultCode("CLIPBRD_E_CANT_CLOSE", 0x800401D4, "CloseClipboard failed.")
MK_E_CONNECTMANUALLY = HResultCode("MK_E_CONNECTMANUALLY", 0x800401E0, "Moniker needs to be connected manually.")
MK_E_EXCEEDEDDEADLINE = HResultCode("MK_E_EXCEEDEDDEADLINE", 0x800401E1, "Operation exceeded deadline.")
MK_E_NEEDGENERIC = HResultCode("MK_E_NEEDGENERIC", 0x800401E2, "Moniker needs to be generic.")
MK_E_UNAVAILABLE = HResultCode("MK_E_UNAVAILABLE", 0x800401E3, "Operation unavailable.")
MK_E_SYNTAX = HResultCode("MK_E_SYNTAX", 0x800401E4, "Invalid syntax.")
MK_E_NOOBJECT = HResultCode("MK_E_NOOBJECT", 0x800401E5, "No object for moniker.")
MK_E_INVALIDEXTENSION = HResultCode("MK_E_INVALIDEXTENSION", 0x800401E6, "Bad extension for file.")
MK_E_INTERMEDIATEINTERFACENOTSUPPORTED = HResultCode("MK_E_INTERMEDIATEINTERFACENOTSUPPORTED", 0x800401E7, "Intermediate operation failed.")
MK_E_NOTBINDABLE = HResultCode("MK_E_NOTBINDABLE", 0x800401E8, "Moniker is not bindable.")
MK_E_NOTBOUND = HResultCode("MK_E_NOTBOUND", 0x800401E9, "Moniker is not bound.")
MK_E_CANTOPENFILE = HResultCode("MK_E_CANTOPENFILE", 0x800401EA, "Moniker cannot open file.")
MK_E_MUSTBOTHERUSER = HResultCode("MK_E_MUSTBOTHERUSER", 0x800401EB, "User input required for operation to succeed.")
MK_E_NOINVERSE = HResultCode("MK_E_NOINVERSE", 0x800401EC, "Moniker class has no inverse.")
MK_E_NOSTORAGE = HResultCode("MK_E_NOSTORAGE", 0x800401ED, "Moniker does not refer to storage.")
MK_E_NOPREFIX = HResultCode("MK_E_NOPREFIX", 0x800401EE, "No common prefix.")
MK_E_ENUMERATION_FAILED = HResultCode("MK_E_ENUMERATION_FAILED", 0x800401EF, "Moniker could not be enumerated.")
CO_E_NOTINITIALIZED = HResultCode("CO_E_NOTINITIALIZED", 0x800401F0, "CoInitialize has not been called.")
CO_E_ALREADYINITIALIZED = HResultCode("CO_E_ALREADYINITIALIZED", 0x800401F1, "CoInitialize has already been called.")
CO_E_CANTDETERMINECLASS = HResultCode("CO_E_CANTDETERMINECLASS", 0x800401F2, "Class of object cannot be determined.")
CO_E_CLASSSTRING = HResultCode("CO_E_CLASSSTRING", 0x800401F3, "Invalid class string.")
CO_E_IIDSTRING = HResultCode("CO_E_IIDSTRING", 0x800401F4, "Invalid interface string.")
CO_E_APPNOTFOUND = HResultCode("CO_E_APPNOTFOUND", 0x800401F5, "Application not found.")
CO_E_APPSINGLEUSE = HResultCode("CO_E_APPSINGLEUSE", 0x800401F6, "Application cannot be run more than once.")
CO_E_ERRORINAPP = HResultCode("CO_E_ERRORINAPP", 0x800401F7, "Some error in application.")
CO_E_DLLNOTFOUND = HResultCode("CO_E_DLLNOTFOUND", 0x800401F8, "DLL for class not found.")
CO_E_ERRORINDLL = HResultCode("CO_E_ERRORINDLL", 0x800401F9, "Error in the DLL.")
CO_E_WRONGOSFORAPP = HResultCode("CO_E_WRONGOSFORAPP", 0x800401FA, "Wrong operating system or operating system version for application.")
CO_E_OBJNOTREG = HResultCode("CO_E_OBJNOTREG", 0x800401FB, "Object is not registered.")
CO_E_OBJISREG = HResultCode("CO_E_OBJISREG", 0x800401FC, "Object is already registered.")
CO_E_OBJNOTCONNECTED = HResultCode("CO_E_OBJNOTCONNECTED", 0x800401FD, "Object is not connected to server.")
CO_E_APPDIDNTREG = HResultCode("CO_E_APPDIDNTREG", 0x800401FE, "Application was launched, but it did not register a class factory.")
CO_E_RELEASED = HResultCode("CO_E_RELEASED", 0x800401FF, "Object has been released.")
EVENT_E_ALL_SUBSCRIBERS_FAILED = HResultCode("EVENT_E_ALL_SUBSCRIBERS_FAILED", 0x80040201, "An event was unable to invoke any of the subscribers.")
EVENT_E_QUERYSYNTAX = HResultCode("EVENT_E_QUERYSYNTAX", 0x80040203, "A syntax error occurred trying to evaluate a query string.")
EVENT_E_QUERYFIELD = HResultCode("EVENT_E_QUERYFIELD", 0x80040204, "An invalid field name was used in a query string.")
EVENT_E_INTERNALEXCEPTION = HResultCode("EVENT_E_INTERNALEXCEPTION", 0x80040205, "An unexpected exception was raised.")
EVENT_E_INTERNALERROR = HResultCode("EVENT_E_INTERNALERROR", 0x80040206, "An unexpected internal error was detected.")
EVENT_E_INVALID_PER_USER_SID = HResultCode("EVENT_E_INVALID_PER_USER_SID", 0x80040207, "The owner security identifier (SID) on a per-user subscription does not exist.")
EVENT_E_USER_EXCEPTION = HResultCode("EVENT_E_USER_EXCEPTION", 0x80040208, "A user-supplied component or subscriber raised an exception.")
EVENT_E_TOO_MANY_METHODS = HResultCode("EVENT_E_TOO_MANY_METHODS", 0x80040209, "An interface has too many methods to fire events from.")
EVENT_E_MISSING_EVENTCLASS = HResultCode("EVENT_E_MISSING_EVENTCLASS", 0x8004020A, "A subscription cannot be stored unless its event class already exists.")
EVENT_E_NOT_ALL_REMOVED = HResultCode("EVENT_E_NOT_ALL_REMOVED", 0x8004020B, "Not all the objects requested could be removed.")
EVENT_E_COMPLUS_NOT_INSTALLED = HResultCode("EVENT_E_COMPLUS_NOT_INSTALLED", 0x8004020C, "COM+ is required for this operation, but it is not installed.")
EVENT_E_CANT_MODIFY_OR_DELETE_UNCONFIGURED_OBJECT = HResultCode("EVENT_E_CANT_MODIFY_OR_DELETE_UNCONFIGURED_OBJECT", 0x8004020D, "Cannot modify or delete an object that was not added using the COM+ Administrative SDK.")
EVENT_E_CANT_MODIFY_OR_DELETE_CONFIGURED_OBJECT = HResultCode("EVENT_E_CANT_MODIFY_OR_DELETE_CONFIGURED_OBJECT", 0x8004020E, "Cannot modify or delete an object that was added using the COM+ Administrative SDK.")
EVENT_E_INVALID_EVENT_CLASS_PARTITION = HResultCode("EVENT_E_INVALID_EVENT_CLASS_PARTITION", 0x8004020F, "The event class for this subscription is in an invalid partition.")
EVENT_E_PER_USER_SID_NOT_LOGGED_ON = HResultCode("EVENT_E_PER_USER_SID_NOT_LOGGED_ON", 0x80040210, "The owner of the PerUser subscription is not logged on to the system specified.")
SCHED_E_TRIGGER_NOT_FOUND = HResultCode("SCHED_E_TRIGGER_NOT_FOUND", 0x80041309, "Trigger not found.")
SCHED_E_TASK_NOT_READY = HResultCode("SCHED_E_TASK_NOT_READY", 0x8004130A, "One or more of the properties that are needed to run this task have not been set.")
SCHED_E_TASK_NOT_RUNNING = HResultCode("SCHED_E_TASK_NOT_RUNNING", 0x8004130B, "There is no running instance of the task.")
SCHED_E_SERVICE_NOT_INSTALLED = HResultCode("SCHED_E_SERVICE_NOT_INSTALLED", 0x8004130C, "The Task Scheduler service is not installed on this computer.")
SCHED_E_CANNOT_OPEN_TASK = HResultCode("SCHED_E_CANNOT_OPEN_TASK", 0x8004130D, "The task object could not be opened.")
SCHED_E_INVALID_TASK = HResultCode("SCHED_E_INVALID_TASK", 0x8004130E, "The object is either an invalid task object or is not a task object.")
SCHED_E_ACCOUNT_INFORMATION_NOT_SET = HResultCode("SCHED_E_ACCOUNT_INFORMATION_NOT_SET", 0x8004130F, "No account information could be found in the Task Scheduler security database for the task indicated.")
SCHED_E_ACCOUNT_NAME_NOT_FOUND = HResultCode("SCHED_E_ACCOUNT_NAME_NOT_FOUND", 0x80041310, "Unable to establish existence of the account specified.")
SCHED_E_ACCOUNT_DBASE_CORRUPT = HResultCode("SCHED_E_ACCOUNT_DBASE_CORRUPT", 0x80041311, "Corruption was detected in the Task Scheduler security database; the database has been reset.")
SCHED_E_NO_SECURITY_SERVICES = HResultCode("SCHED_E_NO_SECURITY_SERVICES", 0x80041312, "Task Scheduler security services are available only on Windows NT operating system.")
SCHED_E_UNKNOWN_OBJECT_VERSION = HResultCode("SCHED_E_UNKNOWN_OBJECT_VERSION", 0x80041313, "The task object version is either unsupported or invalid.")
SCHED_E_UNSUPPORTED_ACCOUNT_OPTION = HResultCode("SCHED_E_UNSUPPORTED_ACCOUNT_OPTION", 0x80041314, "The task has been configured with an unsupported combination of account settings and run-time options.")
SCHED_E_SERVICE_NOT_RUNNING = HResultCode("SCHED_E_SERVICE_NOT_RUNNING", 0x80041315, "The Task Scheduler service is not running.")
SCHED_E_UNEXPECTEDNODE = HResultCode("SCHED_E_UNEXPECTEDNODE", 0x80041316, "The task XML contains an unexpected node.")
SCHED_E_NAMESPACE = HResultCode("SCHED_E_NAMESPACE", 0x80041317, "The task XML contains an element or attribute from an unexpected namespace.")
SCHED_E_INVALIDVALUE = HResultCode("SCHED_E_INVALIDVALUE", 0x80041318, "The task XML contains a value that is incorrectly formatted or out of range.")
SCHED_E_MISSINGNODE = HResultCode("SCHED_E_MISSINGNODE", 0x80041319, "The task XML is missing a required element or attribute.")
SCHED_E_MALFORMEDXML = HResultCode("SCHED_E_MALFORMEDXML", 0x8004131A, "The task XML is malformed.")
SCHED_E_TOO_MANY_NODES = HResultCode("SCHED_E_TOO_MANY_NODES", 0x8004131D, "The task XML contains too many nodes of the same type.")
SCHED_E_PAST_END_BOUNDARY = HResultCode("SCHED_E_PAST_END_BOUNDARY", 0x8004131E, "The task cannot be started after the trigger's end boundary.")
SCHED_E_ALREADY_RUNNING = HResultCode("SCHED_E_ALREADY_RUNNING", 0x8004131F, "An instance of this task is already running.")
SCHED_E_USER_NOT_LOGGED_ON = HResultCode("SCHED_E_USER_NOT_LOGGED_ON", 0x80041320, "The task will not run because the user is not logged on.")
SCHED_E_INVALID_TASK_HASH = HResultCode("SCHED_E_INVALID_TASK_HASH", 0x80041321, "The task image is corrupt or has been tampered with.")
SCHED_E_SERVICE_NOT_AVAILABLE = HResultCode("SCHED_E_SERVICE_NOT_AVAILABLE", 0x80041322, "The Task Scheduler service is not available.")
SCHED_E_SERVICE_TOO_BUSY = HResultCode("SCHED_E_SERVICE_TOO_BUSY", 0x80041323, "The Task Scheduler service is too busy to handle your request. Try again later.")
SCHED_E_TASK_ATTEMPTED = HResultCode("SCHED_E_TASK_ATTEMPTED", 0x80041324, "The Task Scheduler service attempted to run the task, but the task did not run due to one of the constraints in the task definition.")
SCHED_E_TASK_DISABLED = HResultCode("SCHED_E_TASK_DISABLED", 0x80041326, "The task is disabled.")
SCHED_E_TASK_NOT_V1_COMPAT = HResultCode("SCHED_E_TASK_NOT_V1_COMPAT", 0x80041327, "The task has properties that are not compatible with earlier versions of Windows.")
SCHED_E_START_ON_DEMAND = HResultCode("SCHED_E_START_ON_DEMAND", 0x80041328, "The task settings do not allow the task to start on demand.")
XACT_E_ALREADYOTHERSINGLEPHASE = HResultCode("XACT_E_ALREADYOTHERSINGLEPHASE", 0x8004D000, "Another single phase resource manager has already been enlisted in this transaction.")
XACT_E_CANTRETAIN = HResultCode("XACT_E_CANTRETAIN", 0x8004D001, "A retaining commit or abort is not supported.")
XACT_E_COMMITFAILED = HResultCode("XACT_E_COMMITFAILED", 0x8004D002, "The transaction failed to commit for an unknown reason. The transaction was aborted.")
XACT_E_COMMITPREVENTED = HResultCode("XACT_E_COMMITPREVENTED", 0x8004D003, "Cannot call commit on this transaction object because the calling application did not initiate the transaction.")
XACT_E_HEURISTICABORT = HResultCode("XACT_E_HEURISTICABORT", 0x8004D004, "Instead of committing, the resource heuristically aborted.")
XACT_E_HEURISTICCOMMIT = HResultCode("XACT_E_HEURISTICCOMMIT", 0x8004D005, "Instead of aborting, the resource heuristically committed.")
XACT_E_HEURISTICDAMAGE = HResultCode("XACT_E_HEURISTICDAMAGE", 0x8004D006, "Some of the states of the resource were committed while others were aborted, likely because of heuristic decisions.")
XACT_E_HEURISTICDANGER = HResultCode("XACT_E_HEURISTICDANGER", 0x8004D007, "Some of the states of the resource might have been committed while others were aborted, likely because of heuristic decisions.")
XACT_E_ISOLATIONLEVEL = HResultCode("XACT_E_ISOLATIONLEVEL", 0x8004D008, "The requested isolation level is not valid or supported.")
XACT_E_NOASYNC = HResultCode("XACT_E_NOASYNC", 0x8004D009, "The transaction manager does not support an asynchronous operation for this method.")
XACT_E_NOENLIST = HResultCode("XACT_E_NOENLIST", 0x8004D00A, "Unable to enlist in the transaction.")
XACT_E_NOISORETAIN = HResultCode("XACT_E_NOISORETAIN", 0x8004D00B, "The requested semantics of retention of isolation across retaining commit and abort boundaries cannot be supported by this transaction implementation, or isoFlags was not equal to 0.")
XACT_E_NORESOURCE = HResultCode("XACT_E_NORESOURCE", 0x8004D00C, "There is no resource presently associated with this enlistment.")
XACT_E_NOTCURRENT = HResultCode("XACT_E_NOTCURRENT", 0x8004D00D, "The transaction failed to commit due to the failure of optimistic concurrency control in at least one of the resource managers.")
XACT_E_NOTRANSACTION = HResultCode("XACT_E_NOTRANSACTION", 0x8004D00E, "The transaction has already been implicitly or explicitly committed or aborted.")
XACT_E_NOTSUPPORTED = HResultCode("XACT_E_NOTSUPPORTED", 0x8004D00F, "An invalid combination of flags was specified.")
XACT_E_UNKNOWNRMGRID = HResultCode("XACT_E_UNKNOWNRMGRID", 0x8004D010, "The resource manager ID is not associated with this transaction or the transaction manager.")
XACT_E_WRONGSTATE = HResultCode("XACT_E_WRONGSTATE", 0x8004D011, "This method was called in the wrong state.")
XACT_E_WRONGUOW = HResultCode("XACT_E_WRONGUOW", 0x8004D012, "The indicated unit of work does not match the unit of work expected by the resource manager.")
XACT_E_XTIONEXISTS = HResultCode("XACT_E_XTIONEXISTS", 0x8004D013, "An enlistment in a transaction already exists.")
XACT_E_NOIMPORTOBJECT = HResultCode("XACT_E_NOIMPORTOBJECT", 0x8004D014, "An import object for the transaction could not be found.")
XACT_E_INVALIDCOOKIE = HResultCode("XACT_E_INVALIDCOOKIE", 0x8004D015, "The transaction cookie is invalid.")
XACT_E_INDOUBT = HResultCode("XACT_E_INDOUBT", 0x8004D016, "The transaction status is in doubt.")
XACT_E_NOTIMEOUT = HResultCode("XACT_E_NOTIMEOUT", 0x8004D017, "A time-out was specified, but time-outs are not supported.")
XACT_E_ALREADYINPROGRESS = HResultCode("XACT_E_ALREADYINPROGRESS", 0x8004D018, "The requested operation is already in progress for the transaction.")
XACT_E_ABORTED = HResultCode("XACT_E_ABORTED", 0x8004D019, "The transaction has already been aborted.")
XACT_E_LOGFULL = HResultCode("XACT_E_LOGFULL", 0x8004D01A, "The Transaction Manager returned a log full error.")
XACT_E_TMNOTAVAILABLE = HResultCode("XACT_E_TMNOTAVAILABLE", 0x8004D01B, "The transaction manager is not available.")
XACT_E_CONNECTION_DOWN = HResultCode("XACT_E_CONNECTION_DOWN", 0x8004D01C, "A connection with the transaction manager was lost.")
XACT_E_CONNECTION_DENIED = HResultCode("XACT_E_CONNECTION_DENIED", 0x8004D01D, "A request to establish a connection with the transaction manager was denied.")
XACT_E_REENLISTTIMEOUT = HResultCode("XACT_E_REENLISTTIMEOUT", 0x8004D01E, "Resource manager reenlistment to determine transaction status timed out.")
XACT_E_TIP_CONNECT_FAILED = HResultCode("XACT_E_TIP_CONNECT_FAILED", 0x8004D01F, "The transaction manager failed to establish a connection with another Transaction Internet Protocol (TIP) transaction manager.")
XACT_E_TIP_PROTOCOL_ERROR = HResultCode("XACT_E_TIP_PROTOCOL_ERROR", 0x8004D020, "The transaction manager encountered a protocol error with another TIP transaction manager.")
XACT_E_TIP_PULL_FAILED = HResultCode("XACT_E_TIP_PULL_FAILED", 0x8004D021, "The transaction manager could not propagate a transaction from another TIP transaction manager.")
XACT_E_DEST_TMNOTAVAILABLE = HResultCode("XACT_E_DEST_TMNOTAVAILABLE", 0x8004D022, "The transaction manager on the destination machine is not available.")
XACT_E_TIP_DISABLED = HResultCode("XACT_E_TIP_DISABLED", 0x8004D023, "The transaction manager has disabled its support for TIP.")
XACT_E_NETWORK_TX_DISABLED = HResultCode("XACT_E_NETWORK_TX_DISABLED", 0x8004D024, "The transaction manager has disabled its support for remote or network transactions.")
XACT_E_PARTNER_NETWORK_TX_DISABLED = HResultCode("XACT_E_PARTNER_NETWORK_TX_DISABLED", 0x8004D025, "The partner transaction manager has disabled its support for remote or network transactions.")
XACT_E_XA_TX_DISABLED = HResultCode("XACT_E_XA_TX_DISABLED", 0x8004D026, "The transaction manager has disabled its support for XA transactions.")
XACT_E_UNABLE_TO_READ_DTC_CONFIG = HResultCode("XACT_E_UNABLE_TO_READ_DTC_CONFIG", 0x8004D027, "The Microsoft Distributed Transaction Coordinator (MSDTC) was unable to read its configuration information.")
XACT_E_UNABLE_TO_LOAD_DTC_PROXY = HResultCode("XACT_E_UNABLE_TO_LOAD_DTC_PROXY", 0x8004D028, "MSDTC was unable to load the DTC proxy DLL.")
XACT_E_ABORTING = HResultCode("XACT_E_ABORTING", 0x8004D029, "The local transaction has aborted.")
XACT_E_CLERKNOTFOUND = HResultCode("XACT_E_CLERKNOTFOUND", 0x8004D080, "The specified CRM clerk was not found.")
XACT_E_CLERKEXISTS = HResultCode("XACT_E_CLERKEXISTS", 0x8004D081, "The specified CRM clerk already exists.")
XACT_E_RECOVERYINPROGRESS = HResultCode("XACT_E_RECOVERYINPROGRESS", 0x8004D082, "Recovery of the CRM log file is still in progress.")
XACT_E_TRANSACTIONCLOSED = HResultCode("XACT_E_TRANSACTIONCLOSED", 0x8004D083, "The transaction has completed, and the log records have been discarded from the log file.")
XACT_E_INVALIDLSN = HResultCode("XACT_E_INVALIDLSN", 0x8004D084, "lsnToRead is outside of the current limits of the log")
XACT_E_REPLAYREQUEST = HResultCode("XACT_E_REPLAYREQUEST", 0x8004D085, "The COM+ Compensating Resource Manager has records it wishes to replay.")
CONTEXT_E_ABORTED = HResultCode("CONTEXT_E_ABORTED", 0x8004E002, "The root transaction wanted to commit, but the transaction aborted.")
CONTEXT_E_ABORTING = HResultCode("CONTEXT_E_ABORTING", 0x8004E003, "The COM+ component on which the method call was made has a transaction that has already aborted or is in the process of aborting.")
CONTEXT_E_NOCONTEXT = HResultCode("CONTEXT_E_NOCONTEXT", 0x8004E004, "There is no Microsoft Transaction Server (MTS) object context.")
CONTEXT_E_WOULD_DEADLOCK = HResultCode("CONTEXT_E_WOULD_DEADLOCK", 0x8004E005, "The component is configured to use synchronization, and this method call would cause a deadlock to occur.")
CONTEXT_E_SYNCH_TIMEOUT = HResultCode("CONTEXT_E_SYNCH_TIMEOUT", 0x8004E006, "The component is configured to use synchronization, and a thread has timed out waiting to enter the context.")
CONTEXT_E_OLDREF = HResultCode("CONTEXT_E_OLDREF", 0x8004E007, "You made a method call on a COM+ component that has a transaction that has already committed or aborted.")
CONTEXT_E_ROLENOTFOUND = HResultCode("CONTEXT_E_ROLENOTFOUND", 0x8004E00C, "The specified role was not configured for the application.")
CONTEXT_E_TMNOTAVAILABLE = HResultCode("CONTEXT_E_TMNOTAVAILABLE", 0x8004E00F, "COM+ was unable to talk to the MSDTC.")
CO_E_ACTIVATIONFAILED = HResultCode("CO_E_ACTIVATIONFAILED", 0x8004E021, "An unexpected error occurred during COM+ activation.")
CO_E_ACTIVATIONFAILED_EVENTLOGGED = HResultCode("CO_E_ACTIVATIONFAILED_EVENTLOGGED", 0x8004E022, "COM+ activation failed. Check the event log for more information.")
CO_E_ACTIVATIONFAILED_CATALOGERROR = HResultCode("CO_E_ACTIVATIONFAILED_CATALOGERROR", 0x8004E023, "COM+ activation failed due to a catalog or configuration error.")
CO_E_ACTIVATIONFAILED_TIMEOUT = HResultCode("CO_E_ACTIVATIONFAILED_TIMEOUT", 0x8004E024, "COM+ activation failed because the activation could not be completed in the specified amount of time.")
CO_E_INITIALIZATIONFAILED = HResultCode("CO_E_INITIALIZATIONFAILED", 0x8004E025, "COM+ activation failed because an initialization function failed.")
CONTEXT_E_NOJIT = HResultCode("CONTEXT_E_NOJIT", 0x8004E026, "The requested operation requires that just-in-time (JIT) be in the current context, and it is not.")
CONTEXT_E_NOTRANSACTION = HResultCode("CONTEXT_E_NOTRANSACTION", 0x8004E027, "The requested operation requires that the current context have a transaction, and it does not.")
CO_E_THREADINGMODEL_CHANGED = HResultCode("CO_E_THREADINGMODEL_CHANGED", 0x8004E028, "The components threading model has changed after install into a COM+ application. Re-install component.")
CO_E_NOIISINTRINSICS = HResultCode("CO_E_NOIISINTRINSICS", 0x8004E029, "Internet Information Services (IIS) intrinsics not available. Start your work with IIS.")
CO_E_NOCOOKIES = HResultCode("CO_E_NOCOOKIES", 0x8004E02A, "An attempt to write a cookie failed.")
CO_E_DBERROR = HResultCode("CO_E_DBERROR", 0x8004E02B, "An attempt to use a database generated a database-specific error.")
CO_E_NOTPOOLED = HResultCode("CO_E_NOTPOOLED", 0x8004E02C, "The COM+ component you created must use object pooling to work.")
CO_E_NOTCONSTRUCTED = HResultCode("CO_E_NOTCONSTRUCTED", 0x8004E02D, "The COM+ component you created must use object construction to work correctly.")
CO_E_NOSYNCHRONIZATION = HResultCode("CO_E_NOSYNCHRONIZATION", 0x8004E02E, "The COM+ component requires synchronization, and it is not configured for it.")
CO_E_ISOLEVELMISMATCH = HResultCode("CO_E_ISOLEVELMISMATCH", 0x8004E02F, "The TxIsolation Level property for the COM+ component being created is stronger than the TxIsolationLevel for the root.")
CO_E_CALL_OUT_OF_TX_SCOPE_NOT_ALLOWED = HResultCode("CO_E_CALL_OUT_OF_TX_SCOPE_NOT_ALLOWED", 0x8004E030, "The component attempted to make a cross-context call between invocations of EnterTransactionScope and ExitTransactionScope.")
CO_E_EXIT_TRANSACTION_SCOPE_NOT_CALLED = HResultCode("CO_E_EXIT_TRANSACTION_SCOPE_NOT_CALLED", 0x8004E031, "The component made a call to EnterTransactionScope, but did not make a corresponding call to ExitTransactionScope before returning.")

# ============================================================
# FACILITY_WIN32 and FACILITY_WINDOWS
# ============================================================

E_ACCESSDENIED = HResultCode("E_ACCESSDENIED", 0x80070005, "General access denied error.")
E_HANDLE = HResultCode("E_HANDLE", 0x80070006, "Invalid handle.")
E_OUTOFMEMORY = HResultCode("E_OUTOFMEMORY", 0x8007000E, "Ran out of memory.")
E_INVALIDARG = HResultCode("E_INVALIDARG", 0x80070057, "One or more arguments are invalid.")
CO_E_CLASS_CREATE_FAILED = HResultCode("CO_E_CLASS_CREATE_FAILED", 0x80080001, "Attempt to create a class object failed.")
CO_E_SCM_ERROR = HResultCode("CO_E_SCM_ERROR", 0x80080002, "OLE service could not bind object.")
CO_E_SCM_RPC_FAILURE = HResultCode("CO_E_SCM_RPC_FAILURE", 0x80080003, "RPC communication failed with OLE service.")
CO_E_BAD_PATH = HResultCode("CO_E_BAD_PATH", 0x80080004, "Bad path to object.")
CO_E_SERVER_EXEC_FAILURE = HResultCode("CO_E_SERVER_EXEC_FAILURE", 0x80080005, "Server execution failed.")
CO_E_OBJSRV_RPC_FAILURE = HResultCode("CO_E_OBJSRV_RPC_FAILURE", 0x80080006, "OLE service could not communicate with the object server.")
MK_E_NO_NORMALIZED = HResultCode("MK_E_NO_NORMALIZED", 0x80080007, "Moniker path could not be normalized.")
CO_E_SERVER_STOPPING = HResultCode("CO_E_SERVER_STOPPING", 0x80080008, "Object server is stopping when OLE service contacts it.")
MEM_E_INVALID_ROOT = HResultCode("MEM_E_INVALID_ROOT", 0x80080009, "An invalid root block pointer was specified.")
MEM_E_INVALID_LINK = HResultCode("MEM_E_INVALID_LINK", 0x80080010, "An allocation chain contained an invalid link pointer.")
MEM_E_INVALID_SIZE = HResultCode("MEM_E_INVALID_SIZE", 0x80080011, "The requested allocation size was too large.")
CO_E_MISSING_DISPLAYNAME = HResultCode("CO_E_MISSING_DISPLAYNAME", 0x80080015, "The activation requires a display name to be present under the class identifier (CLSID) key.")
CO_E_RUNAS_VALUE_MUST_BE_AAA = HResultCode("CO_E_RUNAS_VALUE_MUST_BE_AAA", 0x80080016, "The activation requires that the RunAs value for the application is Activate As Activator.")
CO_E_ELEVATION_DISABLED = HResultCode("CO_E_ELEVATION_DISABLED", 0x80080017, "The class is not configured to support elevated activation.")

# ============================================================
# FACILITY_SECURITY
# ============================================================

NTE_BAD_UID = HResultCode("NTE_BAD_UID", 0x80090001, "Bad UID.")
NTE_BAD_HASH = HResultCode("NTE_BAD_HASH", 0x80090002, "Bad hash.")
NTE_BAD_KEY = HResultCode("NTE_BAD_KEY", 0x80090003, "Bad key.")
NTE_BAD_LEN = HResultCode("NTE_BAD_LEN", 0x80090004, "Bad length.")
NTE_BAD_DATA = HResultCode("NTE_BAD_DATA", 0x80090005, "Bad data.")
NTE_BAD_SIGNATURE = HResultCode("NTE_BAD_SIGNATURE", 0x80090006, "Invalid signature.")
NTE_BAD_VER = HResultCode("NTE_BAD_VER", 0x80090007, "Bad version of provider.")
NTE_BAD_ALGID = HResultCode("NTE_BAD_ALGID", 0x80090008, "Invalid algorithm specified.")
NTE_BAD_FLAGS = HResultCode("NTE_BAD_FLAGS", 0x80090009, "Invalid flags specified.")
NTE_BAD_TYPE = HResultCode("NTE_BAD_TYPE", 0x8009000A, "Invalid type specified.")
NTE_BAD_KEY_STATE = HResultCode("NTE_BAD_KEY_STATE", 0x8009000B, "Key not valid for use in specified state.")
NTE_BAD_HASH_STATE = HResultCode("NTE_BAD_HASH_STATE", 0x8009000C, "Hash not valid for use in specified state.")
NTE_NO_KEY = HResultCode("NTE_NO_KEY", 0x8009000D, "Key does not exist.")
NTE_NO_MEMORY = HResultCode("NTE_NO_MEMORY", 0x8009000E, "Insufficient memory available for the operation.")
NTE_EXISTS = HResultCode("NTE_EXISTS", 0x8009000F, "Object already exists.")
NTE_PERM = HResultCode("NTE_PERM", 0x80090010, "Access denied.")
NTE_NOT_FOUND = HResultCode("NTE_NOT_FOUND", 0x80090011, "Object was not found.")
NTE_DOUBLE_ENCRYPT = HResultCode("NTE_DOUBLE_ENCRYPT", 0x80090012, "Data already encrypted.")
NTE_BAD_PROVIDER = HResultCode("NTE_BAD_PROVIDER", 0x80090013, "Invalid provider specified.")
NTE_BAD_PROV_TYPE = HResultCode("NTE_BAD_PROV_TYPE", 0x80090014, "Invalid provider type specified.")
NTE_BAD_PUBLIC_KEY = HResultCode("NTE_BAD_PUBLIC_KEY", 0x80090015, "Provider's public key is invalid.")
NTE_BAD_KEYSET = HResultCode("NTE_BAD_KEYSET", 0x80090016, "Keyset does not exist.")
NTE_PROV_TYPE_NOT_DEF = HResultCode("NTE_PROV_TYPE_NOT_DEF", 0x80090017, "Provider type not defined.")
NTE_PROV_TYPE_ENTRY_BAD = HResultCode("NTE_PROV_TYPE_ENTRY_BAD", 0x80090018, "The provider type, as registered, is invalid.")
NTE_KEYSET_NOT_DEF = HResultCode("NTE_KEYSET_NOT_DEF", 0x80090019, "The keyset is not defined.")
NTE_KEYSET_ENTRY_BAD = HResultCode("NTE_KEYSET_ENTRY_BAD", 0x8009001A, "The keyset, as registered, is invalid.")
NTE_PROV_TYPE_NO_MATCH = HResultCode("NTE_PROV_TYPE_NO_MATCH", 0x8009001B, "Provider type does not match registered value.")
NTE_SIGNATURE_FILE_BAD = HResultCode("NTE_SIGNATURE_FILE_BAD", 0x8009001C, "The digital signature file is corrupt.")
NTE_PROVIDER_DLL_FAIL = HResultCode("NTE_PROVIDER_DLL_FAIL", 0x8009001D, "Provider DLL failed to initialize correctly.")
NTE_PROV_DLL_NOT_FOUND = HResultCode("NTE_PROV_DLL_NOT_FOUND", 0x8009001E, "Provider DLL could not be found.")
NTE_BAD_KEYSET_PARAM = HResultCode("NTE_BAD_KEYSET_PARAM", 0x8009001F, "The keyset parameter is invalid.")
NTE_FAIL = HResultCode("NTE_FAIL", 0x80090020, "An internal error occurred.")
NTE_SYS_ERR = HResultCode("NTE_SYS_ERR", 0x80090021, "A base error occurred.")
NTE_SILENT_CONTEXT = HResultCode("NTE_SILENT_CONTEXT", 0x80090022, "Provider could not perform the action because the context was acquired as silent.")
NTE_TOKEN_KEYSET_STORAGE_FULL = HResultCode("NTE_TOKEN_KEYSET_STORAGE_FULL", 0x80090023, "The security token does not have storage space available for an additional container.")
NTE_TEMPORARY_PROFILE = HResultCode("NTE_TEMPORARY_PROFILE", 0x80090024, "The profile for the user is a temporary profile.")
NTE_FIXEDPARAMETER = HResultCode("NTE_FIXEDPARAMETER", 0x80090025, "The key parameters could not be set because the configuration service provider (CSP) uses fixed parameters.")
NTE_INVALID_HANDLE = HResultCode("NTE_INVALID_HANDLE", 0x80090026, "The supplied handle is invalid.")
NTE_INVALID_PARAMETER = HResultCode("NTE_INVALID_PARAMETER", 0x80090027, "The parameter is incorrect.")
NTE_BUFFER_TOO_SMALL = HResultCode("NTE_BUFFER_TOO_SMALL", 0x80090028, "The buffer supplied to a function was too small.")
NTE_NOT_SUPPORTED = HResultCode("NTE_NOT_SUPPORTED", 0x80090029, "The requested operation is not supported.")
NTE_NO_MORE_ITEMS = HResultCode("NTE_NO_MORE_ITEMS", 0x8009002A, "No more data is available.")
NTE_BUFFERS_OVERLAP = HResultCode("NTE_BUFFERS_OVERLAP", 0x8009002B, "The supplied buffers overlap incorrectly.")
NTE_DECRYPTION_FAILURE = HResultCode("NTE_DECRYPTION_FAILURE", 0x8009002C, "The specified data could not be decrypted.")
NTE_INTERNAL_ERROR = HResultCode("NTE_INTERNAL_ERROR", 0x8009002D, "An internal consistency check failed.")
NTE_UI_REQUIRED = HResultCode("NTE_UI_REQUIRED", 0x8009002E, "This operation requires input from the user.")
NTE_HMAC_NOT_SUPPORTED = HResultCode("NTE_HMAC_NOT_SUPPORTED", 0x8009002F, "The cryptographic provider does not support Hash Message Authentication Code (HMAC).")
NTE_DEVICE_NOT_READY = HResultCode("NTE_DEVICE_NOT_READY", 0x80090030, "The device that is required by this cryptographic provider is not ready for use.")
NTE_AUTHENTICATION_IGNORED = HResultCode("NTE_AUTHENTICATION_IGNORED", 0x80090031, "The dictionary attack mitigation is triggered and the provided authorization was ignored by the provider.")
NTE_VALIDATION_FAILED = HResultCode("NTE_VALIDATION_FAILED", 0x80090032, "The validation of the provided data failed the integrity or signature validation.")
NTE_INCORRECT_PASSWORD = HResultCode("NTE_INCORRECT_PASSWORD", 0x80090033, "Incorrect password.")
NTE_ENCRYPTION_FAILURE = HResultCode("NTE_ENCRYPTION_FAILURE", 0x80090034, "Encryption failed.")
NTE_DEVICE_NOT_FOUND = HResultCode("NTE_DEVICE_NOT_FOUND", 0x80090035, "The device that is required by this cryptographic provider is not found on this platform.")
SEC_E_INSUFFICIENT_MEMORY = HResultCode("SEC_E_INSUFFICIENT_MEMORY", 0x80090300, "Not enough memory is available to complete this request.")
SEC_E_INVALID_HANDLE = HResultCode("SEC_E_INVALID_HANDLE", 0x80090301, "The handle specified is invalid.")
SEC_E_UNSUPPORTED_FUNCTION = HResultCode("SEC_E_UNSUPPORTED_FUNCTION", 0x80090302, "The function requested is not supported.")
SEC_E_TARGET_UNKNOWN = HResultCode("SEC_E_TARGET_UNKNOWN", 0x80090303, "The specified target is unknown or unreachable.")
SEC_E_INTERNAL_ERROR = HResultCode("SEC_E_INTERNAL_ERROR", 0x80090304, "The Local Security Authority (LSA) cannot be contacted.")
SEC_E_SECPKG_NOT_FOUND = HResultCode("SEC_E_SECPKG_NOT_FOUND", 0x80090305, "The requested security package does not exist.")
SEC_E_NOT_OWNER = HResultCode("SEC_E_NOT_OWNER", 0x80090306, "The caller is not the owner of the desired credentials.")
SEC_E_CANNOT_INSTALL = HResultCode("SEC_E_CANNOT_INSTALL", 0x80090307, "The security package failed to initialize and cannot be installed.")
SEC_E_INVALID_TOKEN = HResultCode("SEC_E_INVALID_TOKEN", 0x80090308, "The token supplied to the function is invalid.")
SEC_E_CANNOT_PACK = HResultCode("SEC_E_CANNOT_PACK", 0x80090309, "The security package is not able to marshal the logon buffer, so the logon attempt has failed.")
SEC_E_QOP_NOT_SUPPORTED = HResultCode("SEC_E_QOP_NOT_SUPPORTED", 0x8009030A, "The per-message quality of protection is not supported by the security package.")
SEC_E_NO_IMPERSONATION = HResultCode("SEC_E_NO_IMPERSONATION", 0x8009030B, "The security context does not allow impersonation of the client.")
SEC_E_LOGON_DENIED = HResultCode("SEC_E_LOGON_DENIED", 0x8009030C, "The logon attempt failed.")
SEC_E_UNKNOWN_CREDENTIALS = HResultCode("SEC_E_UNKNOWN_CREDENTIALS", 0x8009030D, "The credentials supplied to the package were not recognized.")
SEC_E_NO_CREDENTIALS = HResultCode("SEC_E_NO_CREDENTIALS", 0x8009030E, "No credentials are available in the security package.")
SEC_E_MESSAGE_ALTERED = HResultCode("SEC_E_MESSAGE_ALTERED", 0x8009030F, "The message or signature supplied for verification has been altered.")
SEC_E_OUT_OF_SEQUENCE = HResultCode("SEC_E_OUT_OF_SEQUENCE", 0x80090310, "The message supplied for verification is out of sequence.")
SEC_E_NO_AUTHENTICATING_AUTHORITY = HResultCode("SEC_E_NO_AUTHENTICATING_AUTHORITY", 0x80090311, "No authority could be contacted for authentication.")
SEC_E_BAD_PKGID = HResultCode("SEC_E_BAD_PKGID", 0x80090316, "The requested security package does not exist.")
SEC_E_CONTEXT_EXPIRED = HResultCode("SEC_E_CONTEXT_EXPIRED", 0x80090317, "The context has expired and can no longer be used.")
SEC_E_INCOMPLETE_MESSAGE = HResultCode("SEC_E_INCOMPLETE_MESSAGE", 0x80090318, "The supplied message is incomplete. The signature was not verified.")
SEC_E_INCOMPLETE_CREDENTIALS = HResultCode("SEC_E_INCOMPLETE_CREDENTIALS", 0x80090320, "The credentials supplied were not complete and could not be verified. The context could not be initialized.")
SEC_E_BUFFER_TOO_SMALL = HResultCode("SEC_E_BUFFER_TOO_SMALL", 0x80090321, "The buffers supplied to a function was too small.")
SEC_E_WRONG_PRINCIPAL = HResultCode("SEC_E_WRONG_PRINCIPAL", 0x80090322, "The target principal name is incorrect.")
SEC_E_TIME_SKEW = HResultCode("SEC_E_TIME_SKEW", 0x80090324, "The clocks on the client and server machines are skewed.")
SEC_E_UNTRUSTED_ROOT = HResultCode("SEC_E_UNTRUSTED_ROOT", 0x80090325, "The certificate chain was issued by an authority that is not trusted.")
SEC_E_ILLEGAL_MESSAGE = HResultCode("SEC_E_ILLEGAL_MESSAGE", 0x80090326, "The message received was unexpected or badly formatted.")
SEC_E_CERT_UNKNOWN = HResultCode("SEC_E_CERT_UNKNOWN", 0x80090327, "An unknown error occurred while processing the certificate.")
SEC_E_CERT_EXPIRED = HResultCode("SEC_E_CERT_EXPIRED", 0x80090328, "The received certificate has expired.")
SEC_E_ENCRYPT_FAILURE = HResultCode("SEC_E_ENCRYPT_FAILURE", 0x80090329, "The specified data could not be encrypted.")
SEC_E_DECRYPT_FAILURE = HResultCode("SEC_E_DECRYPT_FAILURE", 0x80090330, "The specified data could not be decrypted.")
SEC_E_ALGORITHM_MISMATCH = HResultCode("SEC_E_ALGORITHM_MISMATCH", 0x80090331, "The client and server cannot communicate because they do not possess a common algorithm.")
SEC_E_SECURITY_QOS_FAILED = HResultCode("SEC_E_SECURITY_QOS_FAILED", 0x80090332, "The security context could not be established due to a failure in the requested quality of service (for example, mutual authentication or delegation).")
SEC_E_UNFINISHED_CONTEXT_DELETED = HResultCode("SEC_E_UNFINISHED_CONTEXT_DELETED", 0x80090333, "A security context was deleted before the context was completed. This is considered a logon failure.")
SEC_E_NO_TGT_REPLY = HResultCode("SEC_E_NO_TGT_REPLY", 0x80090334, "The client is trying to negotiate a context and the server requires user-to-user but did not send a ticket granting ticket (TGT) reply.")
SEC_E_NO_IP_ADDRESSES = HResultCode("SEC_E_NO_IP_ADDRESSES", 0x80090335, "Unable to accomplish the requested task because the local machine does not have an IP addresses.")
SEC_E_WRONG_CREDENTIAL_HANDLE = HResultCode("SEC_E_WRONG_CREDENTIAL_HANDLE", 0x80090336, "The supplied credential handle does not match the credential associated with the security context.")
SEC_E_CRYPTO_SYSTEM_INVALID = HResultCode("SEC_E_CRYPTO_SYSTEM_INVALID", 0x80090337, "The cryptographic system or checksum function is invalid because a required function is unavailable.")
SEC_E_MAX_REFERRALS_EXCEEDED = HResultCode("SEC_E_MAX_REFERRALS_EXCEEDED", 0x80090338, "The number of maximum ticket referrals has been exceeded.")
SEC_E_MUST_BE_KDC = HResultCode("SEC_E_MUST_BE_KDC", 0x80090339, "The local machine must be a Kerberos Domain Controller (KDC), and it is not.")
SEC_E_STRONG_CRYPTO_NOT_SUPPORTED = HResultCode("SEC_E_STRONG_CRYPTO_NOT_SUPPORTED", 0x8009033A, "The other end of the security negotiation requires strong cryptographics, but it is not supported on the local machine.")
SEC_E_TOO_MANY_PRINCIPALS = HResultCode("SEC_E_TOO_MANY_PRINCIPALS", 0x8009033B, "The KDC reply contained more than one principal name.")
SEC_E_NO_PA_DATA = HResultCode("SEC_E_NO_PA_DATA", 0x8009033C, "Expected to find PA data for a hint of what etype to use, but it was not found.")
SEC_E_PKINIT_NAME_MISMATCH = HResultCode("SEC_E_PKINIT_NAME_MISMATCH", 0x8009033D, "The client certificate does not contain a valid user principal name (UPN), or does not match the client name in the logon request.")
SEC_E_SMARTCARD_LOGON_REQUIRED = HResultCode("SEC_E_SMARTCARD_LOGON_REQUIRED", 0x8009033E, "Smart card logon is required and was not used.")
SEC_E_SHUTDOWN_IN_PROGRESS = HResultCode("SEC_E_SHUTDOWN_IN_PROGRESS", 0x8009033F, "A system shutdown is in progress.")
SEC_E_KDC_INVALID_REQUEST = HResultCode("SEC_E_KDC_INVALID_REQUEST", 0x80090340, "An invalid request was sent to the KDC.")
SEC_E_KDC_UNABLE_TO_REFER = HResultCode("SEC_E_KDC_UNABLE_TO_REFER", 0x80090341, "The KDC was unable to generate a referral for the service requested.")
SEC_E_KDC_UNKNOWN_ETYPE = HResultCode("SEC_E_KDC_UNKNOWN_ETYPE", 0x80090342, "The encryption type requested is not supported by the KDC.")
SEC_E_UNSUPPORTED_PREAUTH = HResultCode("SEC_E_UNSUPPORTED_PREAUTH", 0x80090343, "An unsupported pre-authentication mechanism was presented to the Kerberos package.")
SEC_E_DELEGATION_REQUIRED = HResultCode("SEC_E_DELEGATION_REQUIRED", 0x80090345, "The requested operation cannot be completed. The computer must be trusted for delegation, and the current user account must be configured to allow delegation.")
SEC_E_BAD_BINDINGS = HResultCode("SEC_E_BAD_BINDINGS", 0x80090346, "Client's supplied Security Support Provider Interface (SSPI) channel bindings were incorrect.")
SEC_E_MULTIPLE_ACCOUNTS = HResultCode("SEC_E_MULTIPLE_ACCOUNTS", 0x80090347, "The received certificate was mapped to multiple accounts.")
SEC_E_NO_KERB_KEY = HResultCode("SEC_E_NO_KERB_KEY", 0x80090348, "No Kerberos key was found.")
SEC_E_CERT_WRONG_USAGE = HResultCode("SEC_E_CERT_WRONG_USAGE", 0x80090349, "The certificate is not valid for the requested usage.")
SEC_E_DOWNGRADE_DETECTED = HResultCode("SEC_E_DOWNGRADE_DETECTED", 0x80090350, "The system detected a possible attempt to compromise security. Ensure that you can contact the server that authenticated you.")
SEC_E_SMARTCARD_CERT_REVOKED = HResultCode("SEC_E_SMARTCARD_CERT_REVOKED", 0x80090351, "The smart card certificate used for authentication has been revoked.")
SEC_E_ISSUING_CA_UNTRUSTED = HResultCode("SEC_E_ISSUING_CA_UNTRUSTED", 0x80090352, "An untrusted certification authority (CA) was detected while processing the smart card certificate used for authentication.")
SEC_E_REVOCATION_OFFLINE_C = HResultCode("SEC_E_REVOCATION_OFFLINE_C", 0x80090353, "The revocation status of the smart card certificate used for authentication could not be determined.")
SEC_E_PKINIT_CLIENT_FAILURE = HResultCode("SEC_E_PKINIT_CLIENT_FAILURE", 0x80090354, "The smart card certificate used for authentication was not trusted.")
SEC_E_SMARTCARD_CERT_EXPIRED = HResultCode("SEC_E_SMARTCARD_CERT_EXPIRED", 0x80090355, "The smart card certificate used for authentication has expired.")
SEC_E_NO_S4U_PROT_SUPPORT = HResultCode("SEC_E_NO_S4U_PROT_SUPPORT", 0x80090356, "The Kerberos subsystem encountered an error. A service for user protocol requests was made against a domain controller that does not support services for users.")
SEC_E_CROSSREALM_DELEGATION_FAILURE = HResultCode("SEC_E_CROSSREALM_DELEGATION_FAILURE", 0x80090357, "An attempt was made by this server to make a Kerberos-constrained delegation request for a target outside the server's realm.")
SEC_E_REVOCATION_OFFLINE_KDC = HResultCode("SEC_E_REVOCATION_OFFLINE_KDC", 0x80090358, "The revocation status of the domain controller certificate used for smart card authentication could not be determined.")
SEC_E_ISSUING_CA_UNTRUSTED_KDC = HResultCode("SEC_E_ISSUING_CA_UNTRUSTED_KDC", 0x80090359, "An untrusted CA was detected while processing the domain controller certificate used for authentication.")
SEC_E_KDC_CERT_EXPIRED = HResultCode("SEC_E_KDC_CERT_EXPIRED", 0x8009035A, "The domain controller certificate used for smart card logon has expired.")
SEC_E_KDC_CERT_REVOKED = HResultCode("SEC_E_KDC_CERT_REVOKED", 0x8009035B, "The domain controller certificate used for smart card logon has been revoked.")
SEC_E_INVALID_PARAMETER = HResultCode("SEC_E_INVALID_PARAMETER", 0x8009035D, "One or more of the parameters passed to the function were invalid.")
SEC_E_DELEGATION_POLICY = HResultCode("SEC_E_DELEGATION_POLICY", 0x8009035E, "The client policy does not allow credential delegation to the target server.")
SEC_E_POLICY_NLTM_ONLY = HResultCode("SEC_E_POLICY_NLTM_ONLY", 0x8009035F, "The client policy does not allow credential delegation to the target server with NLTM only authentication.")
SEC_E_NO_CONTEXT = HResultCode("SEC_E_NO_CONTEXT", 0x80090361, "The required security context does not exist.")
SEC_E_PKU2U_CERT_FAILURE = HResultCode("SEC_E_PKU2U_CERT_FAILURE", 0x80090362, "The PKU2U protocol encountered an error while attempting to utilize the associated certificates.")
SEC_E_MUTUAL_AUTH_FAILED = HResultCode("SEC_E_MUTUAL_AUTH_FAILED", 0x80090363, "The identity of the server computer could not be verified.")
CRYPT_E_MSG_ERROR = HResultCode("CRYPT_E_MSG_ERROR", 0x80091001, "An error occurred while performing an operation on a cryptographic message.")
CRYPT_E_UNKNOWN_ALGO = HResultCode("CRYPT_E_UNKNOWN_ALGO", 0x80091002, "Unknown cryptographic algorithm.")
CRYPT_E_OID_FORMAT = HResultCode("CRYPT_E_OID_FORMAT", 0x80091003, "The object identifier is poorly formatted.")
CRYPT_E_INVALID_MSG_TYPE = HResultCode("CRYPT_E_INVALID_MSG_TYPE", 0x80091004, "Invalid cryptographic message type.")
CRYPT_E_UNEXPECTED_ENCODING = HResultCode("CRYPT_E_UNEXPECTED_ENCODING", 0x80091005, "Unexpected cryptographic message encoding.")
CRYPT_E_AUTH_ATTR_MISSING = HResultCode("CRYPT_E_AUTH_ATTR_MISSING", 0x80091006, "The cryptographic message does not contain an expected authenticated attribute.")
CRYPT_E_HASH_VALUE = HResultCode("CRYPT_E_HASH_VALUE", 0x80091007, "The hash value is not correct.")
CRYPT_E_INVALID_INDEX = HResultCode("CRYPT_E_INVALID_INDEX", 0x80091008, "The index value is not valid.")
CRYPT_E_ALREADY_DECRYPTED = HResultCode("CRYPT_E_ALREADY_DECRYPTED", 0x80091009, "The content of the cryptographic message has already been decrypted.")
CRYPT_E_NOT_DECRYPTED = HResultCode("CRYPT_E_NOT_DECRYPTED", 0x8009100A, "The content of the cryptographic message has not been decrypted yet.")
CRYPT_E_RECIPIENT_NOT_FOUND = HResultCode("CRYPT_E_RECIPIENT_NOT_FOUND", 0x8009100B, "The enveloped-data message does not contain the specified recipient.")
CRYPT_E_CONTROL_TYPE = HResultCode("CRYPT_E_CONTROL_TYPE", 0x8009100C, "Invalid control type.")
CRYPT_E_ISSUER_SERIALNUMBER = HResultCode("CRYPT_E_ISSUER_SERIALNUMBER", 0x8009100D, "Invalid issuer or serial number.")
CRYPT_E_SIGNER_NOT_FOUND = HResultCode("CRYPT_E_SIGNER_NOT_FOUND", 0x8009100E, "Cannot find the original signer.")
CRYPT_E_ATTRIBUTES_MISSING = HResultCode("CRYPT_E_ATTRIBUTES_MISSING", 0x8009100F, "The cryptographic message does not contain all of the requested attributes.")
CRYPT_E_STREAM_MSG_NOT_READY = HResultCode("CRYPT_E_STREAM_MSG_NOT_READY", 0x80091010, "The streamed cryptographic message is not ready to return data.")
CRYPT_E_STREAM_INSUFFICIENT_DATA = HResultCode("CRYPT_E_STREAM_INSUFFICIENT_DATA", 0x80091011, "The streamed cryptographic message requires more data to complete the decode operation.")
CRYPT_E_BAD_LEN = HResultCode("CRYPT_E_BAD_LEN", 0x80092001, "The length specified for the output data was insufficient.")
CRYPT_E_BAD_ENCODE = HResultCode("CRYPT_E_BAD_ENCODE", 0x80092002, "An error occurred during the encode or decode operation.")
CRYPT_E_FILE_ERROR = HResultCode("CRYPT_E_FILE_ERROR", 0x80092003, "An error occurred while reading or writing to a file.")
CRYPT_E_NOT_FOUND = HResultCode("CRYPT_E_NOT_FOUND", 0x80092004, "Cannot find object or property.")
CRYPT_E_EXISTS = HResultCode("CRYPT_E_EXISTS", 0x80092005, "The object or property already exists.")
CRYPT_E_NO_PROVIDER = HResultCode("CRYPT_E_NO_PROVIDER", 0x80092006, "No provider was specified for the store or object.")
CRYPT_E_SELF_SIGNED = HResultCode("CRYPT_E_SELF_SIGNED", 0x80092007, "The specified certificate is self-signed.")
CRYPT_E_DELETED_PREV = HResultCode("CRYPT_E_DELETED_PREV", 0x80092008, "The previous certificate or certificate revocation list (CRL) context was deleted.")
CRYPT_E_NO_MATCH = HResultCode("CRYPT_E_NO_MATCH", 0x80092009, "Cannot find the requested object.")
CRYPT_E_UNEXPECTED_MSG_TYPE = HResultCode("CRYPT_E_UNEXPECTED_MSG_TYPE", 0x8009200A, "The certificate does not have a property that references a private key.")
CRYPT_E_NO_KEY_PROPERTY = HResultCode("CRYPT_E_NO_KEY_PROPERTY", 0x8009200B, "Cannot find the certificate and private key for decryption.")
CRYPT_E_NO_DECRYPT_CERT = HResultCode("CRYPT_E_NO_DECRYPT_CERT", 0x8009200C, "Cannot find the certificate and private key to use for decryption.")
CRYPT_E_BAD_MSG = HResultCode("CRYPT_E_BAD_MSG", 0x8009200D, "Not a cryptographic message or the cryptographic message is not formatted correctly.")
CRYPT_E_NO_SIGNER = HResultCode("CRYPT_E_NO_SIGNER", 0x8009200E, "The signed cryptographic message does not have a signer for the specified signer index.")
CRYPT_E_PENDING_CLOSE = HResultCode("CRYPT_E_PENDING_CLOSE", 0x8009200F, "Final closure is pending until additional frees or closes.")
CRYPT_E_REVOKED = HResultCode("CRYPT_E_REVOKED", 0x80092010, "The certificate is revoked.")
CRYPT_E_NO_REVOCATION_DLL = HResultCode("CRYPT_E_NO_REVOCATION_DLL", 0x80092011, "No DLL or exported function was found to verify revocation.")
CRYPT_E_NO_REVOCATION_CHECK = HResultCode("CRYPT_E_NO_REVOCATION_CHECK", 0x80092012, "The revocation function was unable to check revocation for the certificate.")
CRYPT_E_REVOCATION_OFFLINE = HResultCode("CRYPT_E_REVOCATION_OFFLINE", 0x80092013, "The revocation function was unable to check revocation because the revocation server was offline.")
CRYPT_E_NOT_IN_REVOCATION_DATABASE = HResultCode("CRYPT_E_NOT_IN_REVOCATION_DATABASE", 0x80092014, "The certificate is not in the revocation server's database.")
CRYPT_E_INVALID_NUMERIC_STRING = HResultCode("CRYPT_E_INVALID_NUMERIC_STRING", 0x80092020, "The string contains a non-numeric character.")
CRYPT_E_INVALID_PRINTABLE_STRING = HResultCode("CRYPT_E_INVALID_PRINTABLE_STRING", 0x80092021, "The string contains a nonprintable character.")
CRYPT_E_INVALID_IA5_STRING = HResultCode("CRYPT_E_INVALID_IA5_STRING", 0x80092022, "The string contains a character not in the 7-bit ASCII character set.")
CRYPT_E_INVALID_X500_STRING = HResultCode("CRYPT_E_INVALID_X500_STRING", 0x80092023, "The string contains an invalid X500 name attribute key, object identifier (OID), value, or delimiter.")
CRYPT_E_NOT_CHAR_STRING = HResultCode("CRYPT_E_NOT_CHAR_STRING", 0x80092024, "The dwValueType for the CERT_NAME_VALUE is not one of the character strings.")
CRYPT_E_FILERESIZED = HResultCode("CRYPT_E_FILERESIZED", 0x80092025, "The Put operation cannot continue. The file needs to be resized.")
CRYPT_E_SECURITY_SETTINGS = HResultCode("CRYPT_E_SECURITY_SETTINGS", 0x80092026, "The cryptographic operation failed due to a local security option setting.")
CRYPT_E_NO_VERIFY_USAGE_DLL = HResultCode("CRYPT_E_NO_VERIFY_USAGE_DLL", 0x80092027, "No DLL or exported function was found to verify subject usage.")
CRYPT_E_NO_VERIFY_USAGE_CHECK = HResultCode("CRYPT_E_NO_VERIFY_USAGE_CHECK", 0x80092028, "The called function was unable to perform a usage check on the subject.")
CRYPT_E_VERIFY_USAGE_OFFLINE = HResultCode("CRYPT_E_VERIFY_USAGE_OFFLINE", 0x80092029, "The called function was unable to complete the usage check because the server was offline.")
CRYPT_E_NOT_IN_CTL = HResultCode("CRYPT_E_NOT_IN_CTL", 0x8009202A, "The subject was not found in a certificate trust list (CTL).")
CRYPT_E_NO_TRUSTED_SIGNER = HResultCode("CRYPT_E_NO_TRUSTED_SIGNER", 0x8009202B, "None of the signers of the cryptographic message or certificate trust list is trusted.")
CRYPT_E_MISSING_PUBKEY_PARA = HResultCode("CRYPT_E_MISSING_PUBKEY_PARA", 0x8009202C, "The public key's algorithm parameters are missing.")
CRYPT_E_OSS_ERROR = HResultCode("CRYPT_E_OSS_ERROR", 0x80093000, "OSS Certificate encode/decode error code base.")
TRUST_E_SYSTEM_ERROR = HResultCode("TRUST_E_SYSTEM_ERROR", 0x80096001, "A system-level error occurred while verifying trust.")
TRUST_E_NO_SIGNER_CERT = HResultCode("TRUST_E_NO_SIGNER_CERT", 0x80096002, "The certificate for the signer of the message is invalid or not found.")
TRUST_E_COUNTER_SIGNER = HResultCode("TRUST_E_COUNTER_SIGNER", 0x80096003, "One of the counter signatures was invalid.")
TRUST_E_CERT_SIGNATURE = HResultCode("TRUST_E_CERT_SIGNATURE", 0x80096004, "The signature of the certificate cannot be verified.")
TRUST_E_TIME_STAMP = HResultCode("TRUST_E_TIME_STAMP", 0x80096005, "The time-stamp signature or certificate could not be verified or is malformed.")
TRUST_E_BAD_DIGEST = HResultCode("TRUST_E_BAD_DIGEST", 0x80096010, "The digital signature of the object did not verify.")
TRUST_E_BASIC_CONSTRAINTS = HResultCode("TRUST_E_BASIC_CONSTRAINTS", 0x80096019, "A certificate's basic constraint extension has not been observed.")
TRUST_E_FINANCIAL_CRITERIA = HResultCode("TRUST_E_FINANCIAL_CRITERIA", 0x8009601E, "The certificate does not meet or contain the Authenticode financial extensions.")
MSSIPOTF_E_OUTOFMEMRANGE = HResultCode("MSSIPOTF_E_OUTOFMEMRANGE", 0x80097001, "Tried to reference a part of the file outside the proper range.")
MSSIPOTF_E_CANTGETOBJECT = HResultCode("MSSIPOTF_E_CANTGETOBJECT", 0x80097002, "Could not retrieve an object from the file.")
MSSIPOTF_E_NOHEADTABLE = HResultCode("MSSIPOTF_E_NOHEADTABLE", 0x80097003, "Could not find the head table in the file.")
MSSIPOTF_E_BAD_MAGICNUMBER = HResultCode("MSSIPOTF_E_BAD_MAGICNUMBER", 0x80097004, "The magic number in the head table is incorrect.")
MSSIPOTF_E_BAD_OFFSET_TABLE = HResultCode("MSSIPOTF_E_BAD_OFFSET_TABLE", 0x80097005, "The offset table has incorrect values.")
MSSIPOTF_E_TABLE_TAGORDER = HResultCode("MSSIPOTF_E_TABLE_TAGORDER", 0x80097006, "Duplicate table tags or the tags are out of alphabetical order.")
MSSIPOTF_E_TABLE_LONGWORD = HResultCode("MSSIPOTF_E_TABLE_LONGWORD", 0x80097007, "A table does not start on a long word boundary.")
MSSIPOTF_E_BAD_FIRST_TABLE_PLACEMENT = HResultCode("MSSIPOTF_E_BAD_FIRST_TABLE_PLACEMENT", 0x80097008, "First table does not appear after header information.")
MSSIPOTF_E_TABLES_OVERLAP = HResultCode("MSSIPOTF_E_TABLES_OVERLAP", 0x80097009, "Two or more tables overlap.")
MSSIPOTF_E_TABLE_PADBYTES = HResultCode("MSSIPOTF_E_TABLE_PADBYTES", 0x8009700A, "Too many pad bytes between tables, or pad bytes are not 0.")
MSSIPOTF_E_FILETOOSMALL = HResultCode("MSSIPOTF_E_FILETOOSMALL", 0x8009700B, "File is too small to contain the last table.")
MSSIPOTF_E_TABLE_CHECKSUM = HResultCode("MSSIPOTF_E_TABLE_CHECKSUM", 0x8009700C, "A table checksum is incorrect.")
MSSIPOTF_E_FILE_CHECKSUM = HResultCode("MSSIPOTF_E_FILE_CHECKSUM", 0x8009700D, "The file checksum is incorrect.")
MSSIPOTF_E_FAILED_POLICY = HResultCode("MSSIPOTF_E_FAILED_POLICY", 0x80097010, "The signature does not have the correct attributes for the policy.")
MSSIPOTF_E_FAILED_HINTS_CHECK = HResultCode("MSSIPOTF_E_FAILED_HINTS_CHECK", 0x80097011, "The file did not pass the hints check.")
MSSIPOTF_E_NOT_OPENTYPE = HResultCode("MSSIPOTF_E_NOT_OPENTYPE", 0x80097012, "The file is not an OpenType file.")
MSSIPOTF_E_FILE = HResultCode("MSSIPOTF_E_FILE", 0x80097013, "Failed on a file operation (such as open, map, read, or write).")
MSSIPOTF_E_CRYPT = HResultCode("MSSIPOTF_E_CRYPT", 0x80097014, "A call to a CryptoAPI function failed.")
MSSIPOTF_E_BADVERSION = HResultCode("MSSIPOTF_E_BADVERSION", 0x80097015, "There is a bad version number in the file.")
MSSIPOTF_E_DSIG_STRUCTURE = HResultCode("MSSIPOTF_E_DSIG_STRUCTURE", 0x80097016, "The structure of the DSIG table is incorrect.")
MSSIPOTF_E_PCONST_CHECK = HResultCode("MSSIPOTF_E_PCONST_CHECK", 0x80097017, "A check failed in a partially constant table.")
MSSIPOTF_E_STRUCTURE = HResultCode("MSSIPOTF_E_STRUCTURE", 0x80097018, "Some kind of structural error.")
ERROR_CRED_REQUIRES_CONFIRMATION = HResultCode("ERROR_CRED_REQUIRES_CONFIRMATION", 0x80097019, "The requested credential requires confirmation.")

# ============================================================
# FACILITY_CERT
# ============================================================

TRUST_E_PROVIDER_UNKNOWN = HResultCode("TRUST_E_PROVIDER_UNKNOWN", 0x800B0001, "Unknown trust provider.")
TRUST_E_ACTION_UNKNOWN = HResultCode("TRUST_E_ACTION_UNKNOWN", 0x800B0002, "The trust verification action specified is not supported by the specified trust provider.")
TRUST_E_SUBJECT_FORM_UNKNOWN = HResultCode("TRUST_E_SUBJECT_FORM_UNKNOWN", 0x800B0003, "The form specified for the subject is not one supported or known by the specified trust provider.")
TRUST_E_SUBJECT_NOT_TRUSTED = HResultCode("TRUST_E_SUBJECT_NOT_TRUSTED", 0x800B0004, "The subject is not trusted for the specified action.")
DIGSIG_E_ENCODE = HResultCode("DIGSIG_E_ENCODE", 0x800B0005, "Error due to problem in ASN.1 encoding process.")
DIGSIG_E_DECODE = HResultCode("DIGSIG_E_DECODE", 0x800B0006, "Error due to problem in ASN.1 decoding process.")
DIGSIG_E_EXTENSIBILITY = HResultCode("DIGSIG_E_EXTENSIBILITY", 0x800B0007, "Reading / writing extensions where attributes are appropriate, and vice versa.")
DIGSIG_E_CRYPTO = HResultCode("DIGSIG_E_CRYPTO", 0x800B0008, "Unspecified cryptographic failure.")
PERSIST_E_SIZEDEFINITE = HResultCode("PERSIST_E_SIZEDEFINITE", 0x800B0009, "The size of the data could not be determined.")
PERSIST_E_SIZEINDEFINITE = HResultCode("PERSIST_E_SIZEINDEFINITE", 0x800B000A, "The size of the indefinite-sized data could not be determined.")
PERSIST_E_NOTSELFSIZING = HResultCode("PERSIST_E_NOTSELFSIZING", 0x800B000B, "This object does not read and write self-sizing data.")
TRUST_E_NOSIGNATURE = HResultCode("TRUST_E_NOSIGNATURE", 0x800B0100, "No signature was present in the subject.")
CERT_E_EXPIRED = HResultCode("CERT_E_EXPIRED", 0x800B0101, "A required certificate is not within its validity period when verifying against the current system clock or the time stamp in the signed file.")
CERT_E_VALIDITYPERIODNESTING = HResultCode("CERT_E_VALIDITYPERIODNESTING", 0x800B0102, "The validity periods of the certification chain do not nest correctly.")
CERT_E_ROLE = HResultCode("CERT_E_ROLE", 0x800B0103, "A certificate that can only be used as an end entity is being used as a CA or vice versa.")
CERT_E_PATHLENCONST = HResultCode("CERT_E_PATHLENCONST", 0x800B0104, "A path length constraint in the certification chain has been violated.")
CERT_E_CRITICAL = HResultCode("CERT_E_CRITICAL", 0x800B0105, "A certificate contains an unknown extension that is marked \"critical\".")
CERT_E_PURPOSE = HResultCode("CERT_E_PURPOSE", 0x800B0106, "A certificate is being used for a purpose other than the ones specified by its CA.")
CERT_E_ISSUERCHAINING = HResultCode("CERT_E_ISSUERCHAINING", 0x800B0107, "A parent of a given certificate did not issue that child certificate.")
CERT_E_MALFORMED = HResultCode("CERT_E_MALFORMED", 0x800B0108, "A certificate is missing or has an empty value for an important field, such as a subject or issuer name.")
CERT_E_UNTRUSTEDROOT = HResultCode("CERT_E_UNTRUSTEDROOT", 0x800B0109, "A certificate chain processed, but terminated in a root certificate that is not trusted by the trust provider.")
CERT_E_CHAINING = HResultCode("CERT_E_CHAINING", 0x800B010A, "A certificate chain could not be built to a trusted root authority.")
TRUST_E_FAIL = HResultCode("TRUST_E_FAIL", 0x800B010B, "Generic trust failure.")
CERT_E_REVOKED = HResultCode("CERT_E_REVOKED", 0x800B010C, "A certificate was explicitly revoked by its issuer.")
CERT_E_UNTRUSTEDTESTROOT = HResultCode("CERT_E_UNTRUSTEDTESTROOT", 0x800B010D, "The certification path terminates with the test root that is not trusted with the current policy settings.")
CERT_E_REVOCATION_FAILURE = HResultCode("CERT_E_REVOCATION_FAILURE", 0x800B010E, "The revocation process could not continue - the certificates could not be checked.")
CERT_E_CN_NO_MATCH = HResultCode("CERT_E_CN_NO_MATCH", 0x800B010F, "The certificate's CN name does not match the passed value.")
CERT_E_WRONG_USAGE = HResultCode("CERT_E_WRONG_USAGE", 0x800B0110, "The certificate is not valid for the requested usage.")
TRUST_E_EXPLICIT_DISTRUST = HResultCode("TRUST_E_EXPLICIT_DISTRUST", 0x800B0111, "The certificate was explicitly marked as untrusted by the user.")
CERT_E_UNTRUSTEDCA = HResultCode("CERT_E_UNTRUSTEDCA", 0x800B0112, "A certification chain processed correctly, but one of the CA certificates is not trusted by the policy provider.")
CERT_E_INVALID_POLICY = HResultCode("CERT_E_INVALID_POLICY", 0x800B0113, "The certificate has invalid policy.")
CERT_E_INVALID_NAME = HResultCode("CERT_E_INVALID_NAME", 0x800B0114, "The certificate has an invalid name. The name is not included in the permitted list or is explicitly excluded.")

# ============================================================
# FACILITY_SETUPAPI
# ============================================================

SPAPI_E_EXPECTED_SECTION_NAME = HResultCode("SPAPI_E_EXPECTED_SECTION_NAME", 0x800F0000, "A non-empty line was encountered in the INF before the start of a section.")
SPAPI_E_BAD_SECTION_NAME_LINE = HResultCode("SPAPI_E_BAD_SECTION_NAME_LINE", 0x800F0001, "A section name marker in the information file (INF) is not complete or does not exist on a line by itself.")
SPAPI_E_SECTION_NAME_TOO_LONG = HResultCode("SPAPI_E_SECTION_NAME_TOO_LONG", 0x800F0002, "An INF section was encountered whose name exceeds the maximum section name length.")
SPAPI_E_GENERAL_SYNTAX = HResultCode("SPAPI_E_GENERAL_SYNTAX", 0x800F0003, "The syntax of the INF is invalid.")
SPAPI_E_WRONG_INF_STYLE = HResultCode("SPAPI_E_WRONG_INF_STYLE", 0x800F0100, "The style of the INF is different than what was requested.")
SPAPI_E_SECTION_NOT_FOUND = HResultCode("SPAPI_E_SECTION_NOT_FOUND", 0x800F0101, "The required section was not found in the INF.")
SPAPI_E_LINE_NOT_FOUND = HResultCode("SPAPI_E_LINE_NOT_FOUND", 0x800F0102, "The required line was not found in the INF.")
SPAPI_E_NO_BACKUP = HResultCode("SPAPI_E_NO_BACKUP", 0x800F0103, "The files affected by the installation of this file queue have not been backed up for uninstall.")
SPAPI_E_NO_ASSOCIATED_CLASS = HResultCode("SPAPI_E_NO_ASSOCIATED_CLASS", 0x800F0200, "The INF or the device information set or element does not have an associated install class.")
SPAPI_E_CLASS_MISMATCH = HResultCode("SPAPI_E_CLASS_MISMATCH", 0x800F0201, "The INF or the device information set or element does not match the specified install class.")
SPAPI_E_DUPLICATE_FOUND = HResultCode("SPAPI_E_DUPLICATE_FOUND", 0x800F0202, "An existing device was found that is a duplicate of the device being manually installed.")
SPAPI_E_NO_DRIVER_SELECTED = HResultCode("SPAPI_E_NO_DRIVER_SELECTED", 0x800F0203, "There is no driver selected for the device information set or element.")
SPAPI_E_KEY_DOES_NOT_EXIST = HResultCode("SPAPI_E_KEY_DOES_NOT_EXIST", 0x800F0204, "The requested device registry key does not exist.")
SPAPI_E_INVALID_DEVINST_NAME = HResultCode("SPAPI_E_INVALID_DEVINST_NAME", 0x800F0205, "The device instance name is invalid.")
SPAPI_E_INVALID_CLASS = HResultCode("SPAPI_E_INVALID_CLASS", 0x800F0206, "The install class is not present or is invalid.")
SPAPI_E_DEVINST_ALREADY_EXISTS = HResultCode("SPAPI_E_DEVINST_ALREADY_EXISTS", 0x800F0207, "The device instance cannot be created because it already exists.")
SPAPI_E_DEVINFO_NOT_REGISTERED = HResultCode("SPAPI_E_DEVINFO_NOT_REGISTERED", 0x800F0208, "The operation cannot be performed on a device information element that has not been registered.")
SPAPI_E_INVALID_REG_PROPERTY = HResultCode("SPAPI_E_INVALID_REG_PROPERTY", 0x800F0209, "The device property code is invalid.")
SPAPI_E_NO_INF = HResultCode("SPAPI_E_NO_INF", 0x800F020A, "The INF from which a driver list is to be built does not exist.")
SPAPI_E_NO_SUCH_DEVINST = HResultCode("SPAPI_E_NO_SUCH_DEVINST", 0x800F020B, "The device instance does not exist in the hardware tree.")
SPAPI_E_CANT_LOAD_CLASS_ICON = HResultCode("SPAPI_E_CANT_LOAD_CLASS_ICON", 0x800F020C, "The icon representing this install class cannot be loaded.")
SPAPI_E_INVALID_CLASS_INSTALLER = HResultCode("SPAPI_E_INVALID_CLASS_INSTALLER", 0x800F020D, "The class installer registry entry is invalid.")
SPAPI_E_DI_DO_DEFAULT = HResultCode("SPAPI_E_DI_DO_DEFAULT", 0x800F020E, "The class installer has indicated that the default action should be performed for this installation request.")
SPAPI_E_DI_NOFILECOPY = HResultCode("SPAPI_E_DI_NOFILECOPY", 0x800F020F, "The operation does not require any files to be copied.")
SPAPI_E_INVALID_HWPROFILE = HResultCode("SPAPI_E_INVALID_HWPROFILE", 0x800F0210, "The specified hardware profile does not exist.")
SPAPI_E_NO_DEVICE_SELECTED = HResultCode("SPAPI_E_NO_DEVICE_SELECTED", 0x800F0211, "There is no device information element currently selected for this device information set.")
SPAPI_E_DEVINFO_LIST_LOCKED = HResultCode("SPAPI_E_DEVINFO_LIST_LOCKED", 0x800F0212, "The operation cannot be performed because the device information set is locked.")
SPAPI_E_DEVINFO_DATA_LOCKED = HResultCode("SPAPI_E_DEVINFO_DATA_LOCKED", 0x800F0213, "The operation cannot be performed because the device information element is locked.")
SPAPI_E_DI_BAD_PATH = HResultCode("SPAPI_E_DI_BAD_PATH", 0x800F0214, "The specified path does not contain any applicable device INFs.")
SPAPI_E_NO_CLASSINSTALL_PARAMS = HResultCode("SPAPI_E_NO_CLASSINSTALL_PARAMS", 0x800F0215, "No class installer parameters have been set for the device information set or element.")
SPAPI_E_FILEQUEUE_LOCKED = HResultCode("SPAPI_E_FILEQUEUE_LOCKED", 0x800F0216, "The operation cannot be performed because the file queue is locked.")
SPAPI_E_BAD_SERVICE_INSTALLSECT = HResultCode("SPAPI_E_BAD_SERVICE_INSTALLSECT", 0x800F0217, "A service installation section in this INF is invalid.")
SPAPI_E_NO_CLASS_DRIVER_LIST = HResultCode("SPAPI_E_NO_CLASS_DRIVER_LIST", 0x800F0218, "There is no class driver list for the device information element.")
SPAPI_E_NO_COMPAT_DRIVERS = HResultCode("SPAPI_E_NO_COMPAT_DRIVERS", 0x800F0219, "The installation failed because a function driver was not specified for this device instance.")
SPAPI_E_NO_DEVICE_ICON = HResultCode("SPAPI_E_NO_DEVICE_ICON", 0x800F021A, "There is presently no default device interface designated for this interface class.")
SPAPI_E_NO_DRIVER_SELECTED_FOR_DEVICE = HResultCode("SPAPI_E_NO_DRIVER_SELECTED_FOR_DEVICE", 0x800F021B, "The operation cannot be performed because the device interface is currently active.")
SPAPI_E_ERROR_NOT_INSTALLED = HResultCode("SPAPI_E_ERROR_NOT_INSTALLED", 0x800F1000, "No installed components were detected.")

# ============================================================
# FACILITY_SCARD
# ============================================================

SCARD_F_INTERNAL_ERROR = HResultCode("SCARD_F_INTERNAL_ERROR", 0x80100001, "An internal consistency check failed.")
SCARD_E_CANCELLED = HResultCode("SCARD_E_CANCELLED", 0x80100002, "The action was canceled by an SCardCancel request.")
SCARD_E_INVALID_HANDLE = HResultCode("SCARD_E_INVALID_HANDLE", 0x80100003, "The supplied handle was invalid.")
SCARD_E_INVALID_PARAMETER = HResultCode("SCARD_E_INVALID_PARAMETER", 0x80100004, "One or more of the supplied parameters could not be properly interpreted.")
SCARD_E_INVALID_TARGET = HResultCode("SCARD_E_INVALID_TARGET", 0x80100005, "Registry startup information is missing or invalid.")
SCARD_E_NO_MEMORY = HResultCode("SCARD_E_NO_MEMORY", 0x80100006, "Not enough memory available to complete this command.")
SCARD_F_WAITED_TOO_LONG = HResultCode("SCARD_F_WAITED_TOO_LONG", 0x80100007, "An internal consistency timer has expired.")
SCARD_E_INSUFFICIENT_BUFFER = HResultCode("SCARD_E_INSUFFICIENT_BUFFER", 0x80100008, "The data buffer to receive returned data is too small for the returned data.")
SCARD_E_UNKNOWN_READER = HResultCode("SCARD_E_UNKNOWN_READER", 0x80100009, "The specified reader name is not recognized.")
SCARD_E_TIMEOUT = HResultCode("SCARD_E_TIMEOUT", 0x8010000A, "The user-specified time-out value has expired.")
SCARD_E_SHARING_VIOLATION = HResultCode("SCARD_E_SHARING_VIOLATION", 0x8010000B, "The smart card cannot be accessed because of other connections outstanding.")
SCARD_E_NO_SMARTCARD = HResultCode("SCARD_E_NO_SMARTCARD", 0x8010000C, "The operation requires a smart card, but no smart card is currently in the device.")
SCARD_E_UNKNOWN_CARD = HResultCode("SCARD_E_UNKNOWN_CARD", 0x8010000D, "The specified smart card name is not recognized.")
SCARD_E_CANT_DISPOSE = HResultCode("SCARD_E_CANT_DISPOSE", 0x8010000E, "The system could not dispose of the media in the requested manner.")
SCARD_E_PROTO_MISMATCH = HResultCode("SCARD_E_PROTO_MISMATCH", 0x8010000F, "The requested protocols are incompatible with the protocol currently in use with the smart card.")
SCARD_E_NOT_READY = HResultCode("SCARD_E_NOT_READY", 0x80100010, "The reader or smart card is not ready to accept commands.")
SCARD_E_INVALID_VALUE = HResultCode("SCARD_E_INVALID_VALUE", 0x80100011, "One or more of the supplied parameters values could not be properly interpreted.")
SCARD_E_SYSTEM_CANCELLED = HResultCode("SCARD_E_SYSTEM_CANCELLED", 0x80100012, "The action was canceled by the system, presumably to log off or shut down.")
SCARD_F_COMM_ERROR = HResultCode("SCARD_F_COMM_ERROR", 0x80100013, "An internal communications error has been detected.")
SCARD_F_UNKNOWN_ERROR = HResultCode("SCARD_F_UNKNOWN_ERROR", 0x80100014, "An internal error has been detected, but the source is unknown.")
SCARD_E_INVALID_ATR = HResultCode("SCARD_E_INVALID_ATR", 0x80100015, "An automatic terminal recognition (ATR) obtained from the registry is not a valid ATR string.")
SCARD_E_NOT_TRANSACTED = HResultCode("SCARD_E_NOT_TRANSACTED", 0x80100016, "An attempt was made to end a nonexistent transaction.")
SCARD_E_READER_UNAVAILABLE = HResultCode("SCARD_E_READER_UNAVAILABLE", 0x80100017, "The specified reader is not currently available for use.")
SCARD_P_SHUTDOWN = HResultCode("SCARD_P_SHUTDOWN", 0x80100018, "The operation has been aborted to allow the server application to exit.")
SCARD_E_PCI_TOO_SMALL = HResultCode("SCARD_E_PCI_TOO_SMALL", 0x80100019, "The peripheral component interconnect (PCI) Receive buffer was too small.")
SCARD_E_READER_UNSUPPORTED = HResultCode("SCARD_E_READER_UNSUPPORTED", 0x8010001A, "The reader driver does not meet minimal requirements for support.")
SCARD_E_DUPLICATE_READER = HResultCode("SCARD_E_DUPLICATE_READER", 0x8010001B, "The reader driver did not produce a unique reader name.")
SCARD_E_CARD_UNSUPPORTED = HResultCode("SCARD_E_CARD_UNSUPPORTED", 0x8010001C, "The smart card does not meet minimal requirements for support.")
SCARD_E_NO_SERVICE = HResultCode("SCARD_E_NO_SERVICE", 0x8010001D, "The smart card resource manager is not running.")
SCARD_E_SERVICE_STOPPED = HResultCode("SCARD_E_SERVICE_STOPPED", 0x8010001E, "The smart card resource manager has shut down.")
SCARD_E_UNEXPECTED = HResultCode("SCARD_E_UNEXPECTED", 0x8010001F, "An unexpected card error has occurred.")
SCARD_E_ICC_INSTALLATION = HResultCode("SCARD_E_ICC_INSTALLATION", 0x80100020, "No primary provider can be found for the smart card.")
SCARD_E_ICC_CREATEORDER = HResultCode("SCARD_E_ICC_CREATEORDER", 0x80100021, "The requested order of object creation is not supported.")
SCARD_E_UNSUPPORTED_FEATURE = HResultCode("SCARD_E_UNSUPPORTED_FEATURE", 0x80100022, "This smart card does not support the requested feature.")
SCARD_E_DIR_NOT_FOUND = HResultCode("SCARD_E_DIR_NOT_FOUND", 0x80100023, "The identified directory does not exist in the smart card.")
SCARD_E_FILE_NOT_FOUND = HResultCode("SCARD_E_FILE_NOT_FOUND", 0x80100024, "The identified file does not exist in the smart card.")
SCARD_E_NO_DIR = HResultCode("SCARD_E_NO_DIR", 0x80100025, "The supplied path does not represent a smart card directory.")
SCARD_E_NO_FILE = HResultCode("SCARD_E_NO_FILE", 0x80100026, "The supplied path does not represent a smart card file.")
SCARD_E_NO_ACCESS = HResultCode("SCARD_E_NO_ACCESS", 0x80100027, "Access is denied to this file.")
SCARD_E_WRITE_TOO_MANY = HResultCode("SCARD_E_WRITE_TOO_MANY", 0x80100028, "The smart card does not have enough memory to store the information.")
SCARD_E_BAD_SEEK = HResultCode("SCARD_E_BAD_SEEK", 0x80100029, "There was an error trying to set the smart card file object pointer.")
SCARD_E_INVALID_CHV = HResultCode("SCARD_E_INVALID_CHV", 0x8010002A, "The supplied PIN is incorrect.")
SCARD_E_UNKNOWN_RES_MNG = HResultCode("SCARD_E_UNKNOWN_RES_MNG", 0x8010002B, "An unrecognized error code was returned from a layered component.")
SCARD_E_NO_SUCH_CERTIFICATE = HResultCode("SCARD_E_NO_SUCH_CERTIFICATE", 0x8010002C, "The requested certificate does not exist.")
SCARD_E_CERTIFICATE_UNAVAILABLE = HResultCode("SCARD_E_CERTIFICATE_UNAVAILABLE", 0x8010002D, "The requested certificate could not be obtained.")
SCARD_E_NO_READERS_AVAILABLE = HResultCode("SCARD_E_NO_READERS_AVAILABLE", 0x8010002E, "Cannot find a smart card reader.")
SCARD_E_COMM_DATA_LOST = HResultCode("SCARD_E_COMM_DATA_LOST", 0x8010002F, "A communications error with the smart card has been detected. Retry the operation.")
SCARD_E_NO_KEY_CONTAINER = HResultCode("SCARD_E_NO_KEY_CONTAINER", 0x80100030, "The requested key container does not exist on the smart card.")
SCARD_E_SERVER_TOO_BUSY = HResultCode("SCARD_E_SERVER_TOO_BUSY", 0x80100031, "The smart card resource manager is too busy to complete this operation.")
SCARD_E_PIN_CACHE_EXPIRED = HResultCode("SCARD_E_PIN_CACHE_EXPIRED", 0x80100032, "The smart card PIN cache has expired.")
SCARD_E_NO_PIN_CACHE = HResultCode("SCARD_E_NO_PIN_CACHE", 0x80100033, "The smart card PIN cannot be cached.")
SCARD_E_READ_ONLY_CARD = HResultCode("SCARD_E_READ_ONLY_CARD", 0x80100034, "The smart card is read-only and cannot be written to.")
SCARD_W_UNSUPPORTED_CARD = HResultCode("SCARD_W_UNSUPPORTED_CARD", 0x80100065, "The reader cannot communicate with the smart card, due to ATR configuration conflicts.")
SCARD_W_UNRESPONSIVE_CARD = HResultCode("SCARD_W_UNRESPONSIVE_CARD", 0x80100066, "The smart card is not responding to a reset.")
SCARD_W_UNPOWERED_CARD = HResultCode("SCARD_W_UNPOWERED_CARD", 0x80100067, "Power has been removed from the smart card, so that further communication is not possible.")
SCARD_W_RESET_CARD = HResultCode("SCARD_W_RESET_CARD", 0x80100068, "The smart card has been reset, so any shared state information is invalid.")
SCARD_W_REMOVED_CARD = HResultCode("SCARD_W_REMOVED_CARD", 0x80100069, "The smart card has been removed, so that further communication is not possible.")
SCARD_W_SECURITY_VIOLATION = HResultCode("SCARD_W_SECURITY_VIOLATION", 0x8010006A, "Access was denied because of a security violation.")
SCARD_W_WRONG_CHV = HResultCode("SCARD_W_WRONG_CHV", 0x8010006B, "The card cannot be accessed because the wrong PIN was presented.")
SCARD_W_CHV_BLOCKED = HResultCode("SCARD_W_CHV_BLOCKED", 0x8010006C, "The card cannot be accessed because the maximum number of PIN entry attempts has been reached.")
SCARD_W_EOF = HResultCode("SCARD_W_EOF", 0x8010006D, "The end of the smart card file has been reached.")
SCARD_W_CANCELLED_BY_USER = HResultCode("SCARD_W_CANCELLED_BY_USER", 0x8010006E, "The action was canceled by the user.")
SCARD_W_CARD_NOT_AUTHENTICATED = HResultCode("SCARD_W_CARD_NOT_AUTHENTICATED", 0x8010006F, "No PIN was presented to the smart card.")
SCARD_W_CACHE_ITEM_NOT_FOUND = HResultCode("SCARD_W_CACHE_ITEM_NOT_FOUND", 0x80100070, "The requested item could not be found in the cache.")
SCARD_W_CACHE_ITEM_STALE = HResultCode("SCARD_W_CACHE_ITEM_STALE", 0x80100071, "The requested cache item is too old and was deleted from the cache.")
SCARD_W_CACHE_ITEM_TOO_BIG = HResultCode("SCARD_W_CACHE_ITEM_TOO_BIG", 0x80100072, "The new cache item exceeds the maximum per-item size defined for the cache.")

# ============================================================
# FACILITY_COMPLUS
# ============================================================

COMADMIN_E_OBJECTERRORS = HResultCode("COMADMIN_E_OBJECTERRORS", 0x80110401, "Errors occurred accessing one or more objects; the ErrorInfo collection contains more detail.")
COMADMIN_E_OBJECTINVALID = HResultCode("COMADMIN_E_OBJECTINVALID", 0x80110402, "One or more of the object's properties are missing or invalid.")
COMADMIN_E_KEYMISSING = HResultCode("COMADMIN_E_KEYMISSING", 0x80110403, "The object was not found in the catalog.")
COMADMIN_E_ALREADYINSTALLED = HResultCode("COMADMIN_E_ALREADYINSTALLED", 0x80110404, "The object is already registered.")
COMADMIN_E_APP_FILE_WRITEFAIL = HResultCode("COMADMIN_E_APP_FILE_WRITEFAIL", 0x80110407, "An error occurred writing to the application file.")
COMADMIN_E_APP_FILE_READFAIL = HResultCode("COMADMIN_E_APP_FILE_READFAIL", 0x80110408, "An error occurred reading the application file.")
COMADMIN_E_APP_FILE_VERSION = HResultCode("COMADMIN_E_APP_FILE_VERSION", 0x80110409, "Invalid version number in application file.")
COMADMIN_E_BADPATH = HResultCode("COMADMIN_E_BADPATH", 0x8011040A, "The file path is invalid.")
COMADMIN_E_APPLICATIONEXISTS = HResultCode("COMADMIN_E_APPLICATIONEXISTS", 0x8011040B, "The application is already installed.")
COMADMIN_E_ROLEEXISTS = HResultCode("COMADMIN_E_ROLEEXISTS", 0x8011040C, "The role already exists.")
COMADMIN_E_CANTCOPYFILE = HResultCode("COMADMIN_E_CANTCOPYFILE", 0x8011040D, "An error occurred copying the file.")
COMADMIN_E_NOUSER = HResultCode("COMADMIN_E_NOUSER", 0x8011040F, "One or more users are not valid.")
COMADMIN_E_INVALIDUSERIDS = HResultCode("COMADMIN_E_INVALIDUSERIDS", 0x80110410, "One or more users in the application file are not valid.")
COMADMIN_E_NOREGISTRYCLSID = HResultCode("COMADMIN_E_NOREGISTRYCLSID", 0x80110411, "The component's CLSID is missing or corrupt.")
COMADMIN_E_BADREGISTRYPROGID = HResultCode("COMADMIN_E_BADREGISTRYPROGID", 0x80110412, "The component's programmatic ID is missing or corrupt.")
COMADMIN_E_AUTHENTICATIONLEVEL = HResultCode("COMADMIN_E_AUTHENTICATIONLEVEL", 0x80110413, "Unable to set required authentication level for update request.")
COMADMIN_E_USERPASSWDNOTVALID = HResultCode("COMADMIN_E_USERPASSWDNOTVALID", 0x80110414, "The identity or password set on the application is not valid.")
COMADMIN_E_CLSIDORIIDMISMATCH = HResultCode("COMADMIN_E_CLSIDORIIDMISMATCH", 0x80110418, "Application file CLSIDs or instance identifiers (IIDs) do not match corresponding DLLs.")
COMADMIN_E_REMOTEINTERFACE = HResultCode("COMADMIN_E_REMOTEINTERFACE", 0x80110419, "Interface information is either missing or changed.")
COMADMIN_E_DLLREGISTERSERVER = HResultCode("COMADMIN_E_DLLREGISTERSERVER", 0x8011041A, "DllRegisterServer failed on component install.")
COMADMIN_E_NOSERVERSHARE = HResultCode("COMADMIN_E_NOSERVERSHARE", 0x8011041B, "No server file share available.")
COMADMIN_E_DLLLOADFAILED = HResultCode("COMADMIN_E_DLLLOADFAILED", 0x8011041D, "DLL could not be loaded.")
COMADMIN_E_BADREGISTRYLIBID = HResultCode("COMADMIN_E_BADREGISTRYLIBID", 0x8011041E, "The registered TypeLib ID is not valid.")
COMADMIN_E_APPDIRNOTFOUND = HResultCode("COMADMIN_E_APPDIRNOTFOUND", 0x8011041F, "Application install directory not found.")
COMADMIN_E_REGISTRARFAILED = HResultCode("COMADMIN_E_REGISTRARFAILED", 0x80110423, "Errors occurred while in the component registrar.")
COMADMIN_E_COMPFILE_DOESNOTEXIST = HResultCode("COMADMIN_E_COMPFILE_DOESNOTEXIST", 0x80110424, "The file does not exist.")
COMADMIN_E_COMPFILE_LOADDLLFAIL = HResultCode("COMADMIN_E_COMPFILE_LOADDLLFAIL", 0x80110425, "The DLL could not be loaded.")
COMADMIN_E_COMPFILE_GETCLASSOBJ = HResultCode("COMADMIN_E_COMPFILE_GETCLASSOBJ", 0x80110426, "GetClassObject failed in the DLL.")
COMADMIN_E_COMPFILE_CLASSNOTAVAIL = HResultCode("COMADMIN_E_COMPFILE_CLASSNOTAVAIL", 0x80110427, "The DLL does not support the components listed in the TypeLib.")
COMADMIN_E_COMPFILE_BADTLB = HResultCode("COMADMIN_E_COMPFILE_BADTLB", 0x80110428, "The TypeLib could not be loaded.")
COMADMIN_E_COMPFILE_NOTINSTALLABLE = HResultCode("COMADMIN_E_COMPFILE_NOTINSTALLABLE", 0x80110429, "The file does not contain components or component information.")
COMADMIN_E_NOTCHANGEABLE = HResultCode("COMADMIN_E_NOTCHANGEABLE", 0x8011042A, "Changes to this object and its subobjects have been disabled.")
COMADMIN_E_NOTDELETEABLE = HResultCode("COMADMIN_E_NOTDELETEABLE", 0x8011042B, "The delete function has been disabled for this object.")
COMADMIN_E_SESSION = HResultCode("COMADMIN_E_SESSION", 0x8011042C, "The server catalog version is not supported.")
COMADMIN_E_COMP_MOVE_LOCKED = HResultCode("COMADMIN_E_COMP_MOVE_LOCKED", 0x8011042D, "The component move was disallowed because the source or destination application is either a system application or currently locked against changes.")
COMADMIN_E_COMP_MOVE_BAD_DEST = HResultCode("COMADMIN_E_COMP_MOVE_BAD_DEST", 0x8011042E, "The component move failed because the destination application no longer exists.")
COMADMIN_E_REGISTERTLB = HResultCode("COMADMIN_E_REGISTERTLB", 0x80110430, "The system was unable to register the TypeLib.")
COMADMIN_E_SYSTEMAPP = HResultCode("COMADMIN_E_SYSTEMAPP", 0x80110433, "This operation cannot be performed on the system application.")
COMADMIN_E_COMPFILE_NOREGISTRAR = HResultCode("COMADMIN_E_COMPFILE_NOREGISTRAR", 0x80110434, "The component registrar referenced in this file is not available.")
COMADMIN_E_COREQCOMPINSTALLED = HResultCode("COMADMIN_E_COREQCOMPINSTALLED", 0x80110435, "A component in the same DLL is already installed.")
COMADMIN_E_SERVICENOTINSTALLED = HResultCode("COMADMIN_E_SERVICENOTINSTALLED", 0x80110436, "The service is not installed.")
COMADMIN_E_PROPERTYSAVEFAILED = HResultCode("COMADMIN_E_PROPERTYSAVEFAILED", 0x80110437, "One or more property settings are either invalid or in conflict with each other.")
COMADMIN_E_OBJECTEXISTS = HResultCode("COMADMIN_E_OBJECTEXISTS", 0x80110438, "The object you are attempting to add or rename already exists.")
COMADMIN_E_COMPONENTEXISTS = HResultCode("COMADMIN_E_COMPONENTEXISTS", 0x80110439, "The component already exists.")
COMADMIN_E_REGFILE_CORRUPT = HResultCode("COMADMIN_E_REGFILE_CORRUPT", 0x8011043B, "The registration file is corrupt.")
COMADMIN_E_PROPERTY_OVERFLOW = HResultCode("COMADMIN_E_PROPERTY_OVERFLOW", 0x8011043C, "The property value is too large.")
COMADMIN_E_NOTINREGISTRY = HResultCode("COMADMIN_E_NOTINREGISTRY", 0x8011043E, "Object was not found in registry.")
COMADMIN_E_OBJECTNOTPOOLABLE = HResultCode("COMADMIN_E_OBJECTNOTPOOLABLE", 0x8011043F, "This object cannot be pooled.")
COMADMIN_E_APPLID_MATCHES_CLSID = HResultCode("COMADMIN_E_APPLID_MATCHES_CLSID", 0x80110446, "A CLSID with the same GUID as the new application ID is already installed on this machine.")
COMADMIN_E_ROLE_DOES_NOT_EXIST = HResultCode("COMADMIN_E_ROLE_DOES_NOT_EXIST", 0x80110447, "A role assigned to a component, interface, or method did not exist in the application.")
COMADMIN_E_START_APP_NEEDS_COMPONENTS = HResultCode("COMADMIN_E_START_APP_NEEDS_COMPONENTS", 0x80110448, "You must have components in an application to start the application.")
COMADMIN_E_REQUIRES_DIFFERENT_PLATFORM = HResultCode("COMADMIN_E_REQUIRES_DIFFERENT_PLATFORM", 0x80110449, "This operation is not enabled on this platform.")
COMADMIN_E_CAN_NOT_EXPORT_APP_PROXY = HResultCode("COMADMIN_E_CAN_NOT_EXPORT_APP_PROXY", 0x8011044A, "Application proxy is not exportable.")
COMADMIN_E_CAN_NOT_START_APP = HResultCode("COMADMIN_E_CAN_NOT_START_APP", 0x8011044B, "Failed to start application because it is either a library application or an application proxy.")
COMADMIN_E_CAN_NOT_EXPORT_SYS_APP = HResultCode("COMADMIN_E_CAN_NOT_EXPORT_SYS_APP", 0x8011044C, "System application is not exportable.")
COMADMIN_E_CANT_SUBSCRIBE_TO_COMPONENT = HResultCode("COMADMIN_E_CANT_SUBSCRIBE_TO_COMPONENT", 0x8011044D, "Cannot subscribe to this component (the component might have been imported).")
COMADMIN_E_EVENTCLASS_CANT_BE_SUBSCRIBER = HResultCode("COMADMIN_E_EVENTCLASS_CANT_BE_SUBSCRIBER", 0x8011044E, "An event class cannot also be a subscriber component.")
COMADMIN_E_LIB_APP_PROXY_INCOMPATIBLE = HResultCode("COMADMIN_E_LIB_APP_PROXY_INCOMPATIBLE", 0x8011044F, "Library applications and application proxies are incompatible.")
COMADMIN_E_BASE_PARTITION_ONLY = HResultCode("COMADMIN_E_BASE_PARTITION_ONLY", 0x80110450, "This function is valid for the base partition only.")
COMADMIN_E_CAT_DUPLICATE_PARTITION_NAME = HResultCode("COMADMIN_E_CAT_DUPLICATE_PARTITION_NAME", 0x80110457, "The specified partition name is already in use on this computer.")
COMADMIN_E_CAT_INVALID_PARTITION_NAME = HResultCode("COMADMIN_E_CAT_INVALID_PARTITION_NAME", 0x80110458, "The specified partition name is invalid. Check that the name contains at least one visible character.")
COMADMIN_E_CAT_PARTITION_IN_USE = HResultCode("COMADMIN_E_CAT_PARTITION_IN_USE", 0x80110459, "The partition cannot be deleted because it is the default partition for one or more users.")
COMADMIN_E_FILE_PARTITION_DUPLICATE_FILES = HResultCode("COMADMIN_E_FILE_PARTITION_DUPLICATE_FILES", 0x8011045A, "The partition cannot be exported because one or more components in the partition have the same file name.")
COMADMIN_E_CAT_IMPORTED_COMPONENTS_NOT_ALLOWED = HResultCode("COMADMIN_E_CAT_IMPORTED_COMPONENTS_NOT_ALLOWED", 0x8011045B, "Applications that contain one or more imported components cannot be installed into a nonbase partition.")
COMADMIN_E_AMBIGUOUS_APPLICATION_NAME = HResultCode("COMADMIN_E_AMBIGUOUS_APPLICATION_NAME", 0x8011045C, "The application name is not unique and cannot be resolved to an application ID.")
COMADMIN_E_AMBIGUOUS_PARTITION_NAME = HResultCode("COMADMIN_E_AMBIGUOUS_PARTITION_NAME", 0x8011045D, "The partition name is not unique and cannot be resolved to a partition ID.")
COMADMIN_E_REGDB_NOTINITIALIZED = HResultCode("COMADMIN_E_REGDB_NOTINITIALIZED", 0x80110472, "The COM+ registry database has not been initialized.")
COMADMIN_E_REGDB_NOTOPEN = HResultCode("COMADMIN_E_REGDB_NOTOPEN", 0x80110473, "The COM+ registry database is not open.")
COMADMIN_E_REGDB_SYSTEMERR = HResultCode("COMADMIN_E_REGDB_SYSTEMERR", 0x80110474, "The COM+ registry database detected a system error.")
COMADMIN_E_REGDB_ALREADYRUNNING = HResultCode("COMADMIN_E_REGDB_ALREADYRUNNING", 0x80110475, "The COM+ registry database is already running.")
COMADMIN_E_MIG_VERSIONNOTSUPPORTED = HResultCode("COMADMIN_E_MIG_VERSIONNOTSUPPORTED", 0x80110480, "This version of the COM+ registry database cannot be migrated.")
COMADMIN_E_MIG_SCHEMANOTFOUND = HResultCode("COMADMIN_E_MIG_SCHEMANOTFOUND", 0x80110481, "The schema version to be migrated could not be found in the COM+ registry database.")
COMADMIN_E_CAT_BITNESSMISMATCH = HResultCode("COMADMIN_E_CAT_BITNESSMISMATCH", 0x80110482, "There was a type mismatch between binaries.")
COMADMIN_E_CAT_UNACCEPTABLEBITNESS = HResultCode("COMADMIN_E_CAT_UNACCEPTABLEBITNESS", 0x80110483, "A binary of unknown or invalid type was provided.")
COMADMIN_E_CAT_WRONGAPPBITNESS = HResultCode("COMADMIN_E_CAT_WRONGAPPBITNESS", 0x80110484, "There was a type mismatch between a binary and an application.")
COMADMIN_E_CAT_PAUSE_RESUME_NOT_SUPPORTED = HResultCode("COMADMIN_E_CAT_PAUSE_RESUME_NOT_SUPPORTED", 0x80110485, "The application cannot be paused or resumed.")
COMADMIN_E_CAT_SERVERFAULT = HResultCode("COMADMIN_E_CAT_SERVERFAULT", 0x80110486, "The COM+ catalog server threw an exception during execution.")
COMQC_E_APPLICATION_NOT_QUEUED = HResultCode("COMQC_E_APPLICATION_NOT_QUEUED", 0x80110600, "Only COM+ applications marked \"queued\" can be invoked using the \"queue\" moniker.")
COMQC_E_NO_QUEUEABLE_INTERFACES = HResultCode("COMQC_E_NO_QUEUEABLE_INTERFACES", 0x80110601, "At least one interface must be marked \"queued\" to create a queued component instance with the \"queue\" moniker.")
COMQC_E_QUEUING_SERVICE_NOT_AVAILABLE = HResultCode("COMQC_E_QUEUING_SERVICE_NOT_AVAILABLE", 0x80110602, "Message Queuing is required for the requested operation and is not installed.")
COMQC_E_NO_IPERSISTSTREAM = HResultCode("COMQC_E_NO_IPERSISTSTREAM", 0x80110603, "Unable to marshal an interface that does not support IPersistStream.")
COMQC_E_BAD_MESSAGE = HResultCode("COMQC_E_BAD_MESSAGE", 0x80110604, "The message is improperly formatted or was damaged in transit.")
COMQC_E_UNAUTHENTICATED = HResultCode("COMQC_E_UNAUTHENTICATED", 0x80110605, "An unauthenticated message was received by an application that accepts only authenticated messages.")
COMQC_E_UNTRUSTED_ENQUEUER = HResultCode("COMQC_E_UNTRUSTED_ENQUEUER", 0x80110606, "The message was requeued or moved by a user not in the QC Trusted User \"role\".")

# ============================================================
# FACILITY_TPM_SERVICES and FACILITY_TPM_SOFTWARE
# ============================================================

TPM_E_ERROR_MASK = HResultCode("TPM_E_ERROR_MASK", 0x80280000, "This is an error mask to convert Trusted Platform Module (TPM) hardware errors to Win32 errors.")
TPM_E_AUTHFAIL = HResultCode("TPM_E_AUTHFAIL", 0x80280001, "Authentication failed.")
TPM_E_BADINDEX = HResultCode("TPM_E_BADINDEX", 0x80280002, "The index to a Platform Configuration Register (PCR), DIR, or other register is incorrect.")
TPM_E_BAD_PARAMETER = HResultCode("TPM_E_BAD_PARAMETER", 0x80280003, "One or more parameters are bad.")
TPM_E_AUDITFAILURE = HResultCode("TPM_E_AUDITFAILURE", 0x80280004, "An operation completed successfully but the auditing of that operation failed.")
TPM_E_CLEAR_DISABLED = HResultCode("TPM_E_CLEAR_DISABLED", 0x80280005, "The clear disable flag is set and all clear operations now require physical access.")
TPM_E_DEACTIVATED = HResultCode("TPM_E_DEACTIVATED", 0x80280006, "Activate the TPM.")
TPM_E_DISABLED = HResultCode("TPM_E_DISABLED", 0x80280007, "Enable the TPM.")
TPM_E_DISABLED_CMD = HResultCode("TPM_E_DISABLED_CMD", 0x80280008, "The target command has been disabled.")
TPM_E_FAIL = HResultCode("TPM_E_FAIL", 0x80280009, "The operation failed.")
TPM_E_BAD_ORDINAL = HResultCode("TPM_E_BAD_ORDINAL", 0x8028000A, "The ordinal was unknown or inconsistent.")
TPM_E_INSTALL_DISABLED = HResultCode("TPM_E_INSTALL_DISABLED", 0x8028000B, "The ability to install an owner is disabled.")
TPM_E_INVALID_KEYHANDLE = HResultCode("TPM_E_INVALID_KEYHANDLE", 0x8028000C, "The key handle cannot be interpreted.")
TPM_E_KEYNOTFOUND = HResultCode("TPM_E_KEYNOTFOUND", 0x8028000D, "The key handle points to an invalid key.")
TPM_E_INAPPROPRIATE_ENC = HResultCode("TPM_E_INAPPROPRIATE_ENC", 0x8028000E, "Unacceptable encryption scheme.")
TPM_E_MIGRATEFAIL = HResultCode("TPM_E_MIGRATEFAIL", 0x8028000F, "Migration authorization failed.")
TPM_E_INVALID_PCR_INFO = HResultCode("TPM_E_INVALID_PCR_INFO", 0x80280010, "PCR information could not be interpreted.")
TPM_E_NOSPACE = HResultCode("TPM_E_NOSPACE", 0x80280011, "No room to load key.")
TPM_E_NOSRK = HResultCode("TPM_E_NOSRK", 0x80280012, "There is no storage root key (SRK) set.")
TPM_E_NOTSEALED_BLOB = HResultCode("TPM_E_NOTSEALED_BLOB", 0x80280013, "An encrypted blob is invalid or was not created by this TPM.")
TPM_E_OWNER_SET = HResultCode("TPM_E_OWNER_SET", 0x80280014, "There is already an owner.")
TPM_E_RESOURCES = HResultCode("TPM_E_RESOURCES", 0x80280015, "The TPM has insufficient internal resources to perform the requested action.")
TPM_E_SHORTRANDOM = HResultCode("TPM_E_SHORTRANDOM", 0x80280016, "A random string was too short.")
TPM_E_SIZE = HResultCode("TPM_E_SIZE", 0x80280017, "The TPM does not have the space to perform the operation.")
TPM_E_WRONGPCRVAL = HResultCode("TPM_E_WRONGPCRVAL", 0x80280018, "The named PCR value does not match the current PCR value.")
TBS_E_INTERNAL_ERROR = HResultCode("TBS_E_INTERNAL_ERROR", 0x80284001, "An internal software error has been detected.")
TBS_E_BAD_PARAMETER = HResultCode("TBS_E_BAD_PARAMETER", 0x80284002, "One or more input parameters are bad.")
TBS_E_INVALID_OUTPUT_POINTER = HResultCode("TBS_E_INVALID_OUTPUT_POINTER", 0x80284003, "A specified output pointer is bad.")
TBS_E_INVALID_CONTEXT = HResultCode("TBS_E_INVALID_CONTEXT", 0x80284004, "The specified context handle does not refer to a valid context.")
TBS_E_INSUFFICIENT_BUFFER = HResultCode("TBS_E_INSUFFICIENT_BUFFER", 0x80284005, "A specified output buffer is too small.")
TBS_E_IOERROR = HResultCode("TBS_E_IOERROR", 0x80284006, "An error occurred while communicating with the TPM.")
TBS_E_INVALID_CONTEXT_PARAM = HResultCode("TBS_E_INVALID_CONTEXT_PARAM", 0x80284007, "One or more context parameters are invalid.")
TBS_E_SERVICE_NOT_RUNNING = HResultCode("TBS_E_SERVICE_NOT_RUNNING", 0x80284008, "The TPM Base Services (TBS) is not running and could not be started.")
TBS_E_TOO_MANY_TBS_CONTEXTS = HResultCode("TBS_E_TOO_MANY_TBS_CONTEXTS", 0x80284009, "A new context could not be created because there are too many open contexts.")
TBS_E_TOO_MANY_RESOURCES = HResultCode("TBS_E_TOO_MANY_RESOURCES", 0x8028400A, "A new virtual resource could not be created because there are too many open virtual resources.")
TBS_E_SERVICE_START_PENDING = HResultCode("TBS_E_SERVICE_START_PENDING", 0x8028400B, "The TBS service has been started but is not yet running.")
TBS_E_PPI_NOT_SUPPORTED = HResultCode("TBS_E_PPI_NOT_SUPPORTED", 0x8028400C, "The physical presence interface is not supported.")
TBS_E_COMMAND_CANCELED = HResultCode("TBS_E_COMMAND_CANCELED", 0x8028400D, "The command was canceled.")
TBS_E_BUFFER_TOO_LARGE = HResultCode("TBS_E_BUFFER_TOO_LARGE", 0x8028400E, "The input or output buffer is too large.")
TBS_E_TPM_NOT_FOUND = HResultCode("TBS_E_TPM_NOT_FOUND", 0x8028400F, "A compatible TPM Security Device cannot be found on this computer.")

# ============================================================
# FACILITY_MEDIASERVER (DRM)
# ============================================================

NS_E_DRM_INVALID_APPLICATION = HResultCode("NS_E_DRM_INVALID_APPLICATION", 0xC00D2711, "A problem has occurred in the Digital Rights Management (DRM) component. Contact product support for this application.")
NS_E_DRM_LICENSE_STORE_ERROR = HResultCode("NS_E_DRM_LICENSE_STORE_ERROR", 0xC00D2712, "License storage is not working. Contact Microsoft product support.")
NS_E_DRM_SECURE_STORE_ERROR = HResultCode("NS_E_DRM_SECURE_STORE_ERROR", 0xC00D2713, "Secure storage is not working. Contact Microsoft product support.")
NS_E_DRM_LICENSE_STORE_SAVE_ERROR = HResultCode("NS_E_DRM_LICENSE_STORE_SAVE_ERROR", 0xC00D2714, "License acquisition did not work. Acquire a new license or contact the content provider for further assistance.")
NS_E_DRM_SECURE_STORE_UNLOCK_ERROR = HResultCode("NS_E_DRM_SECURE_STORE_UNLOCK_ERROR", 0xC00D2715, "Secure storage is not working. Contact Microsoft product support.")
NS_E_DRM_INVALID_CONTENT = HResultCode("NS_E_DRM_INVALID_CONTENT", 0xC00D2716, "The media file is corrupted. Contact the content provider to get a new file.")
NS_E_DRM_UNABLE_TO_OPEN_LICENSE = HResultCode("NS_E_DRM_UNABLE_TO_OPEN_LICENSE", 0xC00D2717, "The license is corrupted. Acquire a new license.")
NS_E_DRM_INVALID_LICENSE = HResultCode("NS_E_DRM_INVALID_LICENSE", 0xC00D2718, "The license is corrupted or invalid. Acquire a new license.")
NS_E_DRM_INVALID_MACHINE = HResultCode("NS_E_DRM_INVALID_MACHINE", 0xC00D2719, "Licenses cannot be copied from one computer to another. Use License Management to transfer licenses, or get a new license for the media file.")


TABLE = ErrorCodeTable.from_namespace("HRESULT", globals(), HResultCode)


def find_by_retval(value: Any) -> List[HResultCode]:
    """
    Return every HResultCode whose value equals value, in name-sorted order.

    An empty list means the value is not in the table; HRESULT 0 (S_OK) is
    not listed, so find_by_retval(0) returns []. Raises InvalidArgument
    unless value is an int in 0..0xFFFFFFFF.
    """
    matches = TABLE.find_by_value(value)
    logger.debug("HRESULT_LOOKUP value=0x%08X matches=%d", value, len(matches))
    return matches
