# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

import numpy as np

from linkmath._typing import ARRAY_LIKE, DOUBLE_ARRAY


def _check_array_and_shape(input: ARRAY_LIKE,
                           return_copy: bool = False,
                           first_axis_length: int | None = None,
                           last_two_axes: tuple[tuple[int, int], ...] | None = None) -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if first_axis_length is not None and in_shape[0] != first_axis_length:
        raise ValueError(f'The length of the first axis must be {first_axis_length}')

    if last_two_axes is not None:
        if len(in_shape) < 2 or tuple(in_shape[-2:]) not in last_two_axes:
            allowed = ' or '.join(f'{rows}x{cols}' for rows, cols in last_two_axes)
            raise ValueError(f'The last two axes must be {allowed}')

    if return_copy:
        return np.array(input, dtype=np.float64)

    # ensure the value is an array
    return np.asanyarray(input, dtype=np.float64)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, return_copy, first_axis_length=4)


def _check_vector_array_and_shape(vector: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, return_copy, first_axis_length=3)


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    """
    Checks for 3x3 rotation matrices or 4x4 affine matrices (stacked along the first axis) and returns the 3x3
    rotation block.
    """
    matrix = _check_array_and_shape(matrix, return_copy, last_two_axes=((3, 3), (4, 4)))

    return matrix[..., :3, :3]
