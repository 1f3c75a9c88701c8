"""Property tree rendering, augmentation and navigation for the inspector."""

from kubeinspect.inspector.augmentation import (
    AddPrefix,
    AddRow,
    AddSuffix,
    AugmentationRegistry,
    AugmentContext,
    MakeActivatable,
    RowMutation,
    default_registry,
)
from kubeinspect.inspector.elements import (
    ActionRow,
    CopyAction,
    ExpanderRow,
    GoNextIndicator,
    InlinePair,
    PropertyPage,
    RenderElement,
    Section,
    StatusIcon,
    UtilizationBar,
)
from kubeinspect.inspector.expansion import ExpansionKey, ExpansionStore
from kubeinspect.inspector.navigation import (
    NavigationController,
    NavigationHost,
    NullNavigationHost,
)
from kubeinspect.inspector.renderer import PropertyTreeRenderer
from kubeinspect.inspector.scope import NavigationScope
from kubeinspect.inspector.utilization import UtilizationSample, utilization
from kubeinspect.inspector.view import InspectorView

__all__ = [
    "ActionRow",
    "AddPrefix",
    "AddRow",
    "AddSuffix",
    "AugmentContext",
    "AugmentationRegistry",
    "CopyAction",
    "ExpanderRow",
    "ExpansionKey",
    "ExpansionStore",
    "GoNextIndicator",
    "InlinePair",
    "InspectorView",
    "MakeActivatable",
    "NavigationController",
    "NavigationHost",
    "NavigationScope",
    "NullNavigationHost",
    "PropertyPage",
    "PropertyTreeRenderer",
    "RenderElement",
    "RowMutation",
    "Section",
    "StatusIcon",
    "UtilizationBar",
    "UtilizationSample",
    "default_registry",
    "utilization",
]
