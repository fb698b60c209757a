import importlib
import logging
import os
import subprocess
from typing import Callable

import torch
import yaml
from torch.utils.cpp_extension import load as load_cpp_extension

from .constants import TORCH_DTYPE_TO_KERNEL_SUFFIX
from .errors import DeviceLaunchError, KernelLoadError
from .utils import LaunchGeometry, get_boolean_env_variable, get_string_env_variable


logger = logging.getLogger(__name__)

CPP_MODULE_PREFIX = "bitkit_cuda_kernels"
CPP_BUILD_DIRECTORY = get_string_env_variable("BITKIT_BUILD_DIRECTORY", "build")
CPP_VERBOSE_BUILD = get_boolean_env_variable("BITKIT_VERBOSE_BUILD", False)
CPP_FUNCTIONS = {}
CPP_REGISTRY_YAML = yaml.safe_load(open(os.path.join(os.path.dirname(__file__), "cpp_registry.yml"), "r"))


def get_kernel_name(base_name: str, dtype: torch.dtype) -> str:
    suffix = TORCH_DTYPE_TO_KERNEL_SUFFIX.get(dtype, None)
    if suffix is None:
        raise KernelLoadError(f"{base_name}_<{dtype}>", f"no kernel specialization exists for {dtype}")

    return f"{base_name}_{suffix}"


def get_cpp_module_name(build_path: str) -> str:
    return f"{CPP_MODULE_PREFIX}_{build_path}"


def _find_registry_entry(name: str) -> dict:
    all_functions = [function for module in CPP_REGISTRY_YAML for function in module["functions"]]
    assert len(all_functions) == len(set(all_functions)), "function names are not unique"

    for module in CPP_REGISTRY_YAML:
        if name in module["functions"]:
            return module

    raise KernelLoadError(name, "there is no CUDA kernel registered with this name")


def _import_prebuilt_module(module_name: str):
    try:
        return importlib.import_module(module_name)
    except ImportError:
        return None


@torch._dynamo.disable
def compile_cpp(name: str) -> None:
    module_entry = _find_registry_entry(name)
    module_name = get_cpp_module_name(module_entry["build_path"])

    # modules built by setup.py take precedence over a JIT build
    module = _import_prebuilt_module(module_name)

    if module is None:
        sources = [os.path.join(os.path.dirname(__file__), source) for source in module_entry["sources"]]
        build_directory = os.path.join(CPP_BUILD_DIRECTORY, module_entry["build_path"])
        os.makedirs(build_directory, exist_ok=True)

        logger.info(f"compiling {module_name} from {len(sources)} source files into {build_directory}")

        try:
            module = load_cpp_extension(
                module_name,
                sources=sources,
                with_cuda=True,
                extra_cflags=["-O3", "-Wall", "-shared", "-fPIC", "-fdiagnostics-color"],
                extra_cuda_cflags=["-O3", "-std=c++17"],
                build_directory=build_directory,
                verbose=CPP_VERBOSE_BUILD,
            )
        except (ImportError, OSError, RuntimeError, subprocess.SubprocessError) as error:
            raise KernelLoadError(name, f"failed to build {module_name} ({error})") from error
    else:
        logger.info(f"using prebuilt extension {module_name}")

    # populate all functions from the module
    for function in module_entry["functions"]:
        cpp_function = getattr(module, function, None)
        if cpp_function is None:
            raise KernelLoadError(function, f"symbol is missing from {module_name}")

        CPP_FUNCTIONS[function] = cpp_function


def get_cpp_function(name: str) -> Callable:
    function = CPP_FUNCTIONS.get(name, None)

    if function is None:
        compile_cpp(name)
        function = get_cpp_function(name)

    return function


def launch_cpp_kernel(name: str, geometry: LaunchGeometry, *args) -> None:
    """resolves the CUDA entry point `name` and enqueues it on the current stream

    the entry point receives `*args` followed by the block size and the number of blocks.
    a zero-sized grid is not launched.
    """

    function = get_cpp_function(name)

    if geometry.grid_size == 0:
        return

    logger.debug(f"launching {name} with {geometry.grid_size} blocks of {geometry.block_size} threads")

    try:
        function(*args, geometry.block_size, geometry.grid_size)
    except RuntimeError as error:
        raise DeviceLaunchError(f"launch of {name} failed: {error}") from error
