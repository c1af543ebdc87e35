from .run import RunConfig, RunExecutor
from .writers import CSVResultsWriter
