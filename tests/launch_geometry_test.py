from parameterized import parameterized

from bitkit import MAX_CUDA_BLOCK_SIZE, LaunchGeometry, get_launch_geometry
from bitkit.utils import check_power_of_2, get_next_power_of_2

from .test_commons import TestCommons


class LaunchGeometryTest(TestCommons):
    @parameterized.expand(TestCommons.make_args_matrix([1, 2, 3, 31, 1023, 1024, 1025, 4097, 100000, 2**31 + 5]))
    def test_launch_geometry_covers_all_elements(self, num_elements: int) -> None:
        block_size, grid_size = get_launch_geometry(num_elements, max_block_size=MAX_CUDA_BLOCK_SIZE)

        assert check_power_of_2(block_size)
        assert block_size <= MAX_CUDA_BLOCK_SIZE
        assert block_size * grid_size >= num_elements
        assert block_size * grid_size < num_elements + block_size

    @parameterized.expand(
        [
            (1, LaunchGeometry(1, 1)),
            (5, LaunchGeometry(8, 1)),
            (1023, LaunchGeometry(1024, 1)),
            (1024, LaunchGeometry(1024, 1)),
            (1025, LaunchGeometry(1024, 2)),
            (100000, LaunchGeometry(1024, 98)),
        ]
    )
    def test_launch_geometry_values(self, num_elements: int, expected: LaunchGeometry) -> None:
        self.assertEqual(get_launch_geometry(num_elements, max_block_size=MAX_CUDA_BLOCK_SIZE), expected)

    def test_launch_geometry_zero_elements(self) -> None:
        geometry = get_launch_geometry(0, max_block_size=MAX_CUDA_BLOCK_SIZE)

        self.assertEqual(geometry.block_size, 1)
        self.assertEqual(geometry.grid_size, 0)

    def test_launch_geometry_smaller_cap(self) -> None:
        self.assertEqual(get_launch_geometry(1000, max_block_size=256), LaunchGeometry(256, 4))

    def test_launch_geometry_negative(self) -> None:
        with self.assertRaises(ValueError):
            get_launch_geometry(-1, max_block_size=MAX_CUDA_BLOCK_SIZE)

    def test_next_power_of_2(self) -> None:
        self.assertEqual([get_next_power_of_2(x) for x in [0, 1, 2, 3, 4, 5, 1000, 1024, 1025]], [1, 1, 2, 4, 4, 8, 1024, 1024, 2048])

    @parameterized.expand([(5, LaunchGeometry(8, 1)), (1024, LaunchGeometry(1024, 1)), (100000, LaunchGeometry(1024, 98))])
    def test_launch_geometry_default_cap(self, num_elements: int, expected: LaunchGeometry) -> None:
        self.assertEqual(get_launch_geometry(num_elements), expected)
