from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional, Union
import logging
from sklearn.utils import check_random_state
from .writers import CSVResultsWriter
from ..polyhedron import EPSILON, HRepresentation, VRepresentation, doubledescription
from ..problems import make_constraints_generator
from ..utils import prepare_arguments


@dataclass
class RunConfig:
    name: str
    direction: Literal['h_to_v', 'v_to_h'] = 'h_to_v'
    input: Optional[dict] = None
    generator: Optional[dict] = None
    tol: float = EPSILON
    remove_duplicates: bool = False
    description: str = ''

    def __post_init__(self):
        if self.direction not in ('h_to_v', 'v_to_h'):
            raise ValueError(f'Unknown conversion direction: {self.direction!r}')
        if (self.input is None) == (self.generator is None):
            raise ValueError('Exactly one of `input` and `generator` should be given')
        if self.generator is not None and self.direction != 'h_to_v':
            raise ValueError('Generators produce H-representations, use `h_to_v`')


class RunExecutor:
    def __init__(self, config: RunConfig, path: Path):
        self.config = config
        self.path = path

    def load_representation(self) -> Union[HRepresentation, VRepresentation]:
        config = self.config
        if config.generator is not None:
            params = dict(config.generator)
            kind = params.pop('kind', 'Polytope')
            rng = check_random_state(params.pop('random_state', None))
            constraints_gen = make_constraints_generator(kind, rng)
            args = prepare_arguments(constraints_gen.generate, params)
            logging.info(f'Generating {kind} with {args}')
            return constraints_gen.generate(**args)
        data = config.input
        if config.direction == 'h_to_v':
            return HRepresentation.from_arrays(
                data.get('A'), data.get('b'), data.get('A_eq'), data.get('b_eq'),
                n_features=data.get('n_features'),
            )
        return VRepresentation.from_arrays(
            data.get('points'), data.get('rays'), data.get('lines'),
            n_features=data.get('n_features'),
        )

    def run(self):
        config = self.config
        rep = self.load_representation()
        logging.info(f'Converting {rep!r} ({config.name})')
        if config.remove_duplicates and isinstance(rep, HRepresentation):
            rep = rep.remove_duplicates(config.tol)
        result = doubledescription(rep, tol=config.tol)
        with CSVResultsWriter(self.path / 'results.csv') as results_writer:
            results_writer.write_representation(result)
        logging.info('Done')
        return result
