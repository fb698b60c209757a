from .custom_op import apply_op1_no_bwd, apply_op2_no_bwd, bitkit_op
from .device import device_synchronize
from .env import get_boolean_env_variable, get_string_env_variable
from .math import MAX_CUDA_BLOCK_SIZE, LaunchGeometry, ceil_divide, check_power_of_2, get_launch_geometry, get_next_power_of_2
from .memory import DeviceBuffer
