"""
Derive all the artifacts of a schema in a single run.

The catalog is built first since everything else depends on the ids, then
widths, decode plans, coded dispatch and registry are built independently.
If anything goes wrong the exception propagates and nothing is returned.
"""
import logging
from typing import Dict, NamedTuple

from .catalog import Catalog, build_catalog
from .core import CodeScheme, Schema, schemes_by_name
from .decode import DecodePlan, build_decode_plans
from .dispatch import CodedDispatch, build_coded_dispatch
from .registry import Registry, TableAccessor, Tables, build_registry
from .width import WidthFormula, build_width_formulas


logger = logging.getLogger(__name__)


class Artifacts(NamedTuple):
    catalog: Catalog
    widths: Dict[str, WidthFormula]
    plans: Dict[str, DecodePlan]
    dispatch: Dict[str, CodedDispatch]
    registry: Registry
    schemes: Dict[str, CodeScheme]

    def accessor(self, entry) -> TableAccessor:
        return TableAccessor(entry, self.widths[entry.name], self.plans[entry.name])

    def tables(self) -> Tables:
        '''Initialize the registry with the default accessors.'''
        return self.registry.initialize(self.accessor)


def generate(schema: Schema, schemes=()) -> Artifacts:
    schemes = schemes_by_name(schemes)

    logger.debug('generating layout for %d tables and %d coded schemes', len(schema), len(schemes))

    schema.validate(schemes)
    catalog = build_catalog(schema)

    artifacts = Artifacts(
        catalog=catalog,
        widths=build_width_formulas(schema, catalog),
        plans=build_decode_plans(schema, catalog, schemes),
        dispatch=build_coded_dispatch(schema, catalog, schemes),
        registry=build_registry(schema, catalog),
        schemes=schemes,
    )

    logger.info('generated layout for %d tables (%d visible)', len(catalog), len(artifacts.registry))

    return artifacts
