from argparse import ArgumentParser
from pathlib import Path
import shutil
import logging
from datetime import datetime
from benedict import benedict
from .run import RunConfig, RunExecutor


def load_config(config_file: str) -> RunConfig:
    config = benedict(config_file)
    return RunConfig(**config)


def cli(argv=None):
    parser = ArgumentParser('Convert between H- and V-representations of polyhedra')
    parser.add_argument('config', type=str, help='Conversion configuration file')
    args = parser.parse_args(argv)

    config_file = args.config
    results_path = Path(config_file).resolve().parent / 'results'
    now = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
    results_path = results_path / f'{now}'
    assert not results_path.exists()
    results_path.mkdir(parents=True, exist_ok=False)

    logging.basicConfig(
        filename=str(results_path / 'log.txt'),
        filemode='a',
        format='%(asctime)s,%(msecs)d %(name)s %(levelname)s %(message)s',
        datefmt='%H:%M:%S',
        level=logging.DEBUG
    )
    logging.getLogger().addHandler(logging.StreamHandler())

    # copy config
    out_config_path = results_path / ('used_config' + Path(config_file).suffix)
    shutil.copy(config_file, out_config_path)

    runner = RunExecutor(config=load_config(config_file), path=results_path)
    runner.run()
    return results_path


if __name__ == '__main__':
    cli()
