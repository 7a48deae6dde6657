import os
import shutil
import subprocess

from loguru import logger

COMPILED_SCHEMAS = "gschemas.compiled"


def compile_schemas(schema_dir: str):
    result = subprocess.run(args=["glib-compile-schemas", "--strict", schema_dir])

    if result.returncode != 0:
        raise Exception(f"glib-compile-schemas exits with return code {result.returncode}")


def ensure_compiled_schemas(schema_dir: str) -> str | None:
    """
    Compiles the ``.gschema.xml`` files in ``schema_dir`` when they are newer than ``gschemas.compiled``.

    Returns the path of the compiled file, or ``None`` if there is nothing to compile,
    in which case the system-wide registry is used.
    """
    if not os.path.isdir(schema_dir):
        return None

    compiled = os.path.join(schema_dir, COMPILED_SCHEMAS)
    sources = [os.path.join(schema_dir, name) for name in os.listdir(schema_dir) if name.endswith(".gschema.xml")]

    if not sources:
        return compiled if os.path.exists(compiled) else None

    if os.path.exists(compiled):
        compiled_mtime = os.path.getmtime(compiled)
        if all(os.path.getmtime(source) <= compiled_mtime for source in sources):
            return compiled

    if not shutil.which("glib-compile-schemas"):
        logger.warning(f"Install `glib-compile-schemas` to use the schemas in {schema_dir}")
        return compiled if os.path.exists(compiled) else None

    logger.info(f"compiling settings schemas in {schema_dir}")
    compile_schemas(schema_dir)
    return compiled
