"""Re-chunking of a bit string between integer vectors of different widths.

The input is a sequence of integers each holding a chunk of a message, least
significant bits first; the output holds the same message split into chunks
of another size.
"""

from __future__ import annotations

from collections.abc import Sequence


def transcribe_bits(
    input_vector: Sequence[int],
    input_bit_length: int,
    input_bits_per_int: int,
    output_bits_per_int: int,
    input_int_bits: int = 64,
    output_int_bits: int = 64,
) -> list[int]:
    """Transcribe the first ``input_bit_length`` bits into new-width chunks.

    ``input_int_bits`` and ``output_int_bits`` are the widths of the integer
    types holding the input and output chunks.
    """
    if input_bits_per_int > input_int_bits:
        raise ValueError(
            f"The input type only contains {input_int_bits} bits, hence we "
            f"cannot extract {input_bits_per_int} bits out of each integer."
        )
    if output_bits_per_int > output_int_bits:
        raise ValueError(
            f"The output type only contains {output_int_bits} bits, hence we "
            f"cannot save {output_bits_per_int} bits in each integer."
        )
    if input_bits_per_int <= 0 or output_bits_per_int <= 0:
        raise ValueError("The number of bits per integer must be positive.")
    if input_bit_length < 0:
        raise ValueError(
            f"The input bit length, {input_bit_length}, cannot be negative."
        )
    if input_bit_length == 0:
        if not input_vector:
            return []
        raise ValueError(
            "Cannot transcribe an empty output vector with a non-empty input "
            "vector."
        )

    input_chunks = -(-input_bit_length // input_bits_per_int)
    if len(input_vector) < input_chunks:
        raise ValueError(
            f"The input vector of size {len(input_vector)} is too small to "
            f"contain {input_bit_length} bits."
        )

    stream = 0
    for index, value in enumerate(input_vector[:input_chunks]):
        offset = index * input_bits_per_int
        width = min(input_bits_per_int, input_bit_length - offset)
        stream |= (value & ((1 << width) - 1)) << offset

    output_chunks = -(-input_bit_length // output_bits_per_int)
    output_mask = (1 << output_bits_per_int) - 1
    return [
        (stream >> (j * output_bits_per_int)) & output_mask
        for j in range(output_chunks)
    ]