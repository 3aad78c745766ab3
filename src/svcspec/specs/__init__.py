"""
Service specifications.

Desired-state records for supervised services, their on-disk schemas,
composite expansion and bind contract validation.
"""

from svcspec.specs.binds import ServiceBind
from svcspec.specs.composite import into_composite_spec, set_composite_binds, update_composite
from svcspec.specs.legacy import ServiceSpecLegacy
from svcspec.specs.load_request import ServiceLoad, into_spec
from svcspec.specs.loader import load_spec_file, spec_files
from svcspec.specs.models import (
    BindingMode,
    CompositeMembers,
    CompositeSpec,
    DesiredState,
    ServiceSpec,
    Spec,
    StandaloneSpec,
    Topology,
    UpdateStrategy,
    spec_ident,
)
from svcspec.specs.validator import validate_binds

__all__ = [
    "ServiceBind",
    "ServiceSpec",
    "ServiceSpecLegacy",
    "CompositeSpec",
    "Spec",
    "StandaloneSpec",
    "CompositeMembers",
    "spec_ident",
    "Topology",
    "UpdateStrategy",
    "BindingMode",
    "DesiredState",
    "ServiceLoad",
    "into_spec",
    "into_composite_spec",
    "update_composite",
    "set_composite_binds",
    "load_spec_file",
    "spec_files",
    "validate_binds",
]
