"""Decode, edit and re-encode the sample configuration.

Also times yamlite against ruamel.yaml on the same document.
"""

import pathlib
import shutil
import tempfile
from time import perf_counter

import ruamel.yaml
from loguru import logger

import yamlite

RUNS = 2000
SAMPLE = pathlib.Path(__file__).resolve().parent / "sample_config.yaml"


def _time(label: str, func, text: str) -> float:
    start = perf_counter()
    for _ in range(RUNS):
        func(text)
    avg = (perf_counter() - start) / RUNS
    print(f"{label} average over {RUNS} runs: {avg * 1000:.3f} ms")
    return avg


def main() -> None:
    logger.enable("yamlite")
    data, err = yamlite.read(SAMPLE)
    if err is not None:
        print(f"could not read sample: {err}")
        return
    print("database host:", yamlite.get_path(data, "database.host"))
    print("missing key:", yamlite.get_path(data, "cache.ttl", "<absent>"))

    with tempfile.TemporaryDirectory() as tmp:
        target = pathlib.Path(tmp) / "config.yaml"
        shutil.copyfile(SAMPLE, target)
        ok, err = yamlite.modify(
            target,
            lambda doc: yamlite.set_path(doc, "service.version", 4),
        )
        print("modify:", "ok" if ok else err)
        print(target.read_text(encoding="utf-8"))

    text = SAMPLE.read_text(encoding="utf-8")
    logger.disable("yamlite")
    _time("yamlite", yamlite.loads, text)
    _time("ruamel (safe)", ruamel.yaml.YAML(typ="safe").load, text)


if __name__ == "__main__":
    main()
