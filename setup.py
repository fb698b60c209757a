import os

from setuptools import find_packages, setup


VERSION = "0.0.0.dev"

_NO_CUDA = os.getenv("BITKIT_NO_CUDA", "0").lower() in ["1", "true"]


def get_ext_modules() -> list:
    # CUDA kernels are compiled just in time on first use when they are not built here
    if _NO_CUDA:
        return []

    try:
        from torch.utils.cpp_extension import CUDA_HOME, CUDAExtension
    except ImportError:
        return []

    if CUDA_HOME is None:
        return []

    import yaml

    cpp_registry: list[dict] = yaml.safe_load(open(os.path.join("bitkit", "cpp_registry.yml"), "r"))

    return [
        CUDAExtension(
            f"bitkit_cuda_kernels_{module['build_path']}",
            [os.path.join("bitkit", source) for source in module["sources"]],
            extra_compile_args={"cxx": ["-O3"], "nvcc": ["-O3", "-std=c++17"]},
        )
        for module in cpp_registry
    ]


def get_cmdclass(ext_modules: list) -> dict:
    if len(ext_modules) == 0:
        return {}

    from torch.utils.cpp_extension import BuildExtension

    return {"build_ext": BuildExtension}


ext_modules = get_ext_modules()

setup(
    name="bitkit",
    version=VERSION,
    description="bitwise and nonzero tensor operators for PyTorch with CPU, CUDA and Triton kernels",
    packages=find_packages("./", include=["bitkit", "bitkit.*"]),
    ext_modules=ext_modules,
    cmdclass=get_cmdclass(ext_modules),
    python_requires=">=3.10",
    install_requires=["torch>=2.4", "triton", "pyyaml"],
    extras_require={"test": ["pytest", "parameterized"]},
    include_package_data=True,
    package_data={"": ["**/*.cu", "**/*.cpp", "**/*.cuh", "**/*.h", "*.yml"]},
)
