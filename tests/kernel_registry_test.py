from unittest.mock import patch

import torch
from parameterized import parameterized

from bitkit import KernelLoadError, get_cpp_function, get_kernel_name
from bitkit.kernel_registry import CPP_FUNCTIONS, CPP_REGISTRY_YAML, get_cpp_module_name

from .test_commons import TestCommons


class KernelRegistryTest(TestCommons):
    @parameterized.expand(
        [
            ("bitwise_and", torch.uint8, "bitwise_and_u8"),
            ("bitwise_or", torch.uint32, "bitwise_or_u32"),
            ("bitwise_xor", torch.int64, "bitwise_xor_i64"),
            ("nonzero", torch.bfloat16, "nonzero_bf16"),
            ("count_nonzero", torch.float16, "count_nonzero_f16"),
        ]
    )
    def test_get_kernel_name(self, base_name: str, dtype: torch.dtype, expected: str) -> None:
        self.assertEqual(get_kernel_name(base_name, dtype), expected)

    def test_get_kernel_name_unknown_dtype(self) -> None:
        with self.assertRaises(KernelLoadError):
            get_kernel_name("bitwise_and", torch.int16)

    def test_registry_lists_every_bitwise_specialization(self) -> None:
        all_functions = {function for module in CPP_REGISTRY_YAML for function in module["functions"]}

        for base_name in ["bitwise_and", "bitwise_or", "bitwise_xor"]:
            for dtype in [torch.uint8, torch.uint32, torch.int64]:
                assert get_kernel_name(base_name, dtype) in all_functions

    def test_unknown_kernel_is_not_compiled(self) -> None:
        with patch("bitkit.kernel_registry.load_cpp_extension") as load_cpp_extension:
            with self.assertRaises(KernelLoadError) as context:
                get_cpp_function("bitwise_nand_u8")

        load_cpp_extension.assert_not_called()
        self.assertEqual(context.exception.name, "bitwise_nand_u8")

    def test_missing_symbol_in_module(self) -> None:
        class _Module:
            pass

        with (
            patch.dict(CPP_FUNCTIONS, clear=True),
            patch("bitkit.kernel_registry._import_prebuilt_module", return_value=_Module()),
        ):
            with self.assertRaises(KernelLoadError):
                get_cpp_function("bitwise_and_u8")

            assert "bitwise_and_u8" not in CPP_FUNCTIONS

    def test_build_failure_is_reported(self) -> None:
        with (
            patch.dict(CPP_FUNCTIONS, clear=True),
            patch("bitkit.kernel_registry._import_prebuilt_module", return_value=None),
            patch("bitkit.kernel_registry.load_cpp_extension", side_effect=RuntimeError("nvcc not found")),
        ):
            with self.assertRaises(KernelLoadError) as context:
                get_cpp_function("nonzero_f32")

        assert isinstance(context.exception.__cause__, RuntimeError)

    def test_module_names(self) -> None:
        self.assertEqual(get_cpp_module_name("bitwise"), "bitkit_cuda_kernels_bitwise")
