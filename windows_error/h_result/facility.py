#!/usr/bin/env python3
"""
windows_error/h_result/facility.py

HRESULT facility codes.

See [HRESULT](https://learn.microsoft.com/en-us/openspecs/windows_protocols/ms-erref/0642cb2f-2075-4469-918c-4441e69c548a)
for the facility field layout. FACILITY_SECURITY and FACILITY_SSPI share
code 0x0009; find_by_code() resolves that code to FACILITY_SECURITY.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from windows_error.error_code import InvalidArgument, is_integer
from windows_error.status_codes import StatusCode


@dataclass(frozen=True, eq=False)
class FacilityCode:
    name: str
    value: int
    description: str

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FacilityCode):
            return self.value == other.value
        if is_integer(other):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return f"(0x{self.value:04x}) {self.name}: {self.description}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "description": self.description,
        }


FACILITY_NULL = FacilityCode("FACILITY_NULL", 0x0000, "The default facility code.")
FACILITY_RPC = FacilityCode("FACILITY_RPC", 0x0001, "The source of the error code is an RPC subsystem.")
FACILITY_DISPATCH = FacilityCode("FACILITY_DISPATCH", 0x0002, "The source of the error code is a COM Dispatch.")
FACILITY_STORAGE = FacilityCode("FACILITY_STORAGE", 0x0003, "The source of the error code is OLE Storage.")
FACILITY_ITF = FacilityCode("FACILITY_ITF", 0x0004, "The source of the error code is COM/OLE Interface management.")
FACILITY_WIN32 = FacilityCode("FACILITY_WIN32", 0x0007, "This region is reserved to map undecorated error codes into HRESULTs.")
FACILITY_WINDOWS = FacilityCode("FACILITY_WINDOWS", 0x0008, "The source of the error code is the Windows subsystem.")
FACILITY_SECURITY = FacilityCode("FACILITY_SECURITY", 0x0009, "The source of the error code is the Security API layer.")
FACILITY_SSPI = FacilityCode("FACILITY_SSPI", 0x0009, "The source of the error code is the Security API layer.")
FACILITY_CONTROL = FacilityCode("FACILITY_CONTROL", 0x000A, "The source of the error code is the control mechanism.")
FACILITY_CERT = FacilityCode("FACILITY_CERT", 0x000B, "The source of the error code is a certificate client or server?")
FACILITY_INTERNET = FacilityCode("FACILITY_INTERNET", 0x000C, "The source of the error code is Wininet related.")
FACILITY_MEDIASERVER = FacilityCode("FACILITY_MEDIASERVER", 0x000D, "The source of the error code is the Windows Media Server.")
FACILITY_MSMQ = FacilityCode("FACILITY_MSMQ", 0x000E, "The source of the error code is the Microsoft Message Queue.")
FACILITY_SETUPAPI = FacilityCode("FACILITY_SETUPAPI", 0x000F, "The source of the error code is the Setup API.")
FACILITY_SCARD = FacilityCode("FACILITY_SCARD", 0x0010, "The source of the error code is the Smart-card subsystem.")
FACILITY_COMPLUS = FacilityCode("FACILITY_COMPLUS", 0x0011, "The source of the error code is COM+.")
FACILITY_AAF = FacilityCode("FACILITY_AAF", 0x0012, "The source of the error code is the Microsoft agent.")
FACILITY_URT = FacilityCode("FACILITY_URT", 0x0013, "The source of the error code is .NET CLR.")
FACILITY_ACS = FacilityCode("FACILITY_ACS", 0x0014, "The source of the error code is the audit collection service.")
FACILITY_DPLAY = FacilityCode("FACILITY_DPLAY", 0x0015, "The source of the error code is Direct Play.")
FACILITY_UMI = FacilityCode("FACILITY_UMI", 0x0016, "The source of the error code is the ubiquitous memoryintrospection service.")
FACILITY_SXS = FacilityCode("FACILITY_SXS", 0x0017, "The source of the error code is Side-by-side servicing.")
FACILITY_WINDOWS_CE = FacilityCode("FACILITY_WINDOWS_CE", 0x0018, "The error code is specific to Windows CE.")
FACILITY_HTTP = FacilityCode("FACILITY_HTTP", 0x0019, "The source of the error code is HTTP support.")
FACILITY_USERMODE_COMMONLOG = FacilityCode("FACILITY_USERMODE_COMMONLOG", 0x001A, "The source of the error code is common Logging support.")
FACILITY_USERMODE_FILTER_MANAGER = FacilityCode("FACILITY_USERMODE_FILTER_MANAGER", 0x001F, "The source of the error code is the user mode filter manager.")
FACILITY_BACKGROUNDCOPY = FacilityCode("FACILITY_BACKGROUNDCOPY", 0x0020, "The source of the error code is background copy control")
FACILITY_CONFIGURATION = FacilityCode("FACILITY_CONFIGURATION", 0x0021, "The source of the error code is configuration services.")
FACILITY_STATE_MANAGEMENT = FacilityCode("FACILITY_STATE_MANAGEMENT", 0x0022, "The source of the error code is state management services.")
FACILITY_METADIRECTORY = FacilityCode("FACILITY_METADIRECTORY", 0x0023, "The source of the error code is the Microsoft Identity Server.")
FACILITY_WINDOWSUPDATE = FacilityCode("FACILITY_WINDOWSUPDATE", 0x0024, "The source of the error code is a Windows update.")
FACILITY_DIRECTORYSERVICE = FacilityCode("FACILITY_DIRECTORYSERVICE", 0x0025, "The source of the error code is Active Directory.")
FACILITY_GRAPHICS = FacilityCode("FACILITY_GRAPHICS", 0x0026, "The source of the error code is the graphics drivers.")
FACILITY_SHELL = FacilityCode("FACILITY_SHELL", 0x0027, "The source of the error code is the user Shell.")
FACILITY_TPM_SERVICES = FacilityCode("FACILITY_TPM_SERVICES", 0x0028, "The source of the error code is the Trusted Platform Module services.")
FACILITY_TPM_SOFTWARE = FacilityCode("FACILITY_TPM_SOFTWARE", 0x0029, "The source of the error code is the Trusted Platform Module applications.")
FACILITY_PLA = FacilityCode("FACILITY_PLA", 0x0030, "The source of the error code is Performance Logs and Alerts")
FACILITY_FVE = FacilityCode("FACILITY_FVE", 0x0031, "The source of the error code is Full volume encryption.")
FACILITY_FWP = FacilityCode("FACILITY_FWP", 0x0032, "The source of the error code is the Firewall Platform.")
FACILITY_WINRM = FacilityCode("FACILITY_WINRM", 0x0033, "The source of the error code is the Windows Resource Manager.")
FACILITY_NDIS = FacilityCode("FACILITY_NDIS", 0x0034, "The source of the error code is the Network Driver Interface.")
FACILITY_USERMODE_HYPERVISOR = FacilityCode("FACILITY_USERMODE_HYPERVISOR", 0x0035, "The source of the error code is the Usermode Hypervisor components.")
FACILITY_CMI = FacilityCode("FACILITY_CMI", 0x0036, "The source of the error code is the Configuration Management Infrastructure.")
FACILITY_USERMODE_VIRTUALIZATION = FacilityCode("FACILITY_USERMODE_VIRTUALIZATION", 0x0037, "The source of the error code is the user mode virtualization subsystem.")
FACILITY_USERMODE_VOLMGR = FacilityCode("FACILITY_USERMODE_VOLMGR", 0x0038, "The source of the error code is  the user mode volume manager")
FACILITY_BCD = FacilityCode("FACILITY_BCD", 0x0039, "The source of the error code is the Boot Configuration Database.")
FACILITY_USERMODE_VHD = FacilityCode("FACILITY_USERMODE_VHD", 0x003A, "The source of the error code is user mode virtual hard disk support.")
FACILITY_SDIAG = FacilityCode("FACILITY_SDIAG", 0x003C, "The source of the error code is System Diagnostics.")
FACILITY_WEBSERVICES = FacilityCode("FACILITY_WEBSERVICES", 0x003D, "The source of the error code is the Web Services.")
FACILITY_WINDOWS_DEFENDER = FacilityCode("FACILITY_WINDOWS_DEFENDER", 0x0050, "The source of the error code is a Windows Defender component.")
FACILITY_OPC = FacilityCode("FACILITY_OPC", 0x0051, "The source of the error code is the open connectivity service.")


FACILITIES: Dict[str, FacilityCode] = {
    attr: obj for attr, obj in list(globals().items()) if isinstance(obj, FacilityCode)
}
_SORTED_NAMES: List[str] = sorted(FACILITIES)


def find_by_code(retval: Any) -> Optional[FacilityCode]:
    """
    Return the FacilityCode registered for retval, or None.

    Names are scanned in sorted order and the first match wins.
    Raises InvalidArgument if retval is not an int.
    """
    if not is_integer(retval):
        raise InvalidArgument("Invalid value!", StatusCode.INPUT_NOT_INTEGER)

    for name in _SORTED_NAMES:
        facility = FACILITIES[name]
        if facility.value == retval:
            return facility
    return None


def find_by_name(name: str) -> Optional[FacilityCode]:
    """
    Resolve a facility by constant name; the FACILITY_ prefix is optional
    and matching ignores case.
    """
    key = name.strip().upper()
    if not key.startswith("FACILITY_"):
        key = f"FACILITY_{key}"
    return FACILITIES.get(key)
