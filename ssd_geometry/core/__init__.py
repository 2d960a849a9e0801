"""
Core detector geometry engine.

This subpackage contains the construction and query machinery:
- constants: unit conversion table
- units: unit resolution and canonical conversion
- data_classes: data structures (Detector, DetectorObject, points, units)
- primitives: volume primitives with membership predicates
- materials: material property table
- world: world volume construction
- objects: object classification and construction
- hierarchy: hierarchy ordering
- containment: point-in-detector queries
- sampling: interior point sampling
- detector: detector builder
- io_utils: export of sampled points
"""

# Errors
from .errors import (
    DetectorConfigError,
    UnrecognizedUnitError,
    UnsupportedCoordinateSystemError,
    MissingConfigFieldError,
    UnknownMaterialError,
    UnknownShapeError,
    UnrecognizedObjectClassError,
    SamplingBudgetExceededError,
)

# Data classes
from .data_classes import (
    CoordinateSystem,
    ObjectClass,
    Unit,
    UnitTable,
    Interval,
    CartesianPoint,
    CylindricalPoint,
    MaterialProperties,
    DetectorObject,
    Detector,
)

# Units
from .constants import UNIT_CONVERSION
from .units import (
    resolve_units,
    geom_round,
    to_canonical,
    from_canonical,
)

# Primitives
from .primitives import (
    Tube,
    CartesianBox,
    UnionShape,
    DifferenceShape,
    Translation,
    build_shape,
    as_cartesian,
    as_cylindrical,
    has_negative_radius,
)

# Materials
from .materials import (
    MATERIAL_PROPERTIES,
    load_material_table,
    lookup_material,
)

# Construction
from .world import construct_world, construct_periodicity
from .objects import construct_objects, classify_object
from .hierarchy import sort_by_hierarchy, hierarchy_groups
from .detector import DetectorBuilder, build_detector

# Queries
from .containment import in_any, in_world, is_inside, is_inside_class, locate, classify
from .sampling import (
    SamplingBounds,
    default_bounds,
    is_valid_sample,
    sample_interior_points,
    sample_with_independent_streams,
    cartesian_to_cylindrical,
)

# IO
from .io_utils import samples_to_dataframe, export_samples_to_csv

__all__ = [
    # Errors
    'DetectorConfigError',
    'UnrecognizedUnitError',
    'UnsupportedCoordinateSystemError',
    'MissingConfigFieldError',
    'UnknownMaterialError',
    'UnknownShapeError',
    'UnrecognizedObjectClassError',
    'SamplingBudgetExceededError',
    # Data classes
    'CoordinateSystem',
    'ObjectClass',
    'Unit',
    'UnitTable',
    'Interval',
    'CartesianPoint',
    'CylindricalPoint',
    'MaterialProperties',
    'DetectorObject',
    'Detector',
    # Units
    'UNIT_CONVERSION',
    'resolve_units',
    'geom_round',
    'to_canonical',
    'from_canonical',
    # Primitives
    'Tube',
    'CartesianBox',
    'UnionShape',
    'DifferenceShape',
    'Translation',
    'build_shape',
    'as_cartesian',
    'as_cylindrical',
    'has_negative_radius',
    # Materials
    'MATERIAL_PROPERTIES',
    'load_material_table',
    'lookup_material',
    # Construction
    'construct_world',
    'construct_periodicity',
    'construct_objects',
    'classify_object',
    'sort_by_hierarchy',
    'hierarchy_groups',
    'DetectorBuilder',
    'build_detector',
    # Queries
    'in_any',
    'in_world',
    'is_inside',
    'is_inside_class',
    'locate',
    'classify',
    'SamplingBounds',
    'default_bounds',
    'is_valid_sample',
    'sample_interior_points',
    'sample_with_independent_streams',
    'cartesian_to_cylindrical',
    # IO
    'samples_to_dataframe',
    'export_samples_to_csv',
]
