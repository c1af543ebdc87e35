import pandas as pd
from pathlib import Path
import logging
from ..polyhedron.representation import HRepresentation, VRepresentation


class CSVResultsWriter:
    """Collects rows of a representation and saves them as one CSV table on close."""
    def __init__(self, path: Path):
        self.path = path
        self._collection = dict()
        self.count = 0

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def open(self):
        assert not self.path.exists(), f'Results path {self.path!r} should not exist before open'

    def close(self):
        logging.info(f'Saving results into {self.path!r}')
        self.flush(self.path)

    def append(self, params: dict):
        for key in self._collection.keys():
            if key not in params:
                self._collection[key].append(None)

        for k, v in params.items():
            if k not in self._collection:
                self._collection[k] = [None] * self.count
            self._collection[k].append(v)

        self.count += 1

    def append_rows(self, kind: str, rows, offsets=None):
        for i, row in enumerate(rows):
            params = {'kind': kind}
            params.update({f'x{j}': v for j, v in enumerate(row)})
            if offsets is not None:
                params['b'] = offsets[i]
            self.append(params)

    def write_representation(self, rep):
        if isinstance(rep, VRepresentation):
            self.append_rows('point', rep.points)
            self.append_rows('ray', rep.rays)
            self.append_rows('line', rep.lines)
        elif isinstance(rep, HRepresentation):
            if rep.hyperplanes is not None:
                self.append_rows('hyperplane', rep.hyperplanes.A, rep.hyperplanes.b)
            self.append_rows('halfspace', rep.halfspaces.A, rep.halfspaces.b)
        else:
            raise TypeError(f'Cannot write {type(rep).__name__}')

    def flush(self, path: Path):
        pd.DataFrame(self._collection).to_csv(path)
