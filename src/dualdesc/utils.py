import numpy as np
import warnings
from sklearn.utils import check_random_state


def get_rng(self) -> np.random.RandomState:
    if isinstance(self.random_state, int):
        warnings.warn(
            f'Int random state is passed to {self!r}. '
            'Probably generator was meant to be passed.'
        )
    return check_random_state(self.random_state)


def get_method_argnames(method):
    return method.__code__.co_varnames[:method.__code__.co_argcount]


def prepare_arguments(method, params):
    method_argnames = get_method_argnames(method)
    args = {
        argname: params[argname]
        for argname in method_argnames
        if argname in params
    }
    diff = set(params.keys()) - set(args.keys())
    if len(diff) > 0:
        warnings.warn(f'Some parameters cannot be used: {diff}')
    return args
