import numpy as np

from quadsplit import Node
from quadsplit.render import draw_nodes


def test_draw_nodes_outlines_on_copy() -> None:
    gray = np.zeros((16, 16), dtype=np.int32)
    out = draw_nodes(gray, [Node(0, 0, 8, 8)], color=(0, 255, 0))

    assert out.shape == (16, 16, 3)
    assert out.dtype == np.uint8
    assert out[0, 0].tolist() == [0, 255, 0]
    assert out[7, 7].tolist() == [0, 255, 0]
    assert out[3, 3].tolist() == [0, 0, 0]
    assert (gray == 0).all()


def test_draw_nodes_keeps_bgr_input() -> None:
    bgr = np.full((8, 8, 3), 10, dtype=np.uint8)
    out = draw_nodes(bgr, [])

    assert out is not bgr
    assert (out == 10).all()


def test_overlay_of_decomposition_via_package_api() -> None:
    import quadsplit

    img = quadsplit.quadrant_luma(16, 16)
    nodes = quadsplit.QuadTreeDecomposer(16, 16, is_rgb=False).decompose_by_count([], img, 4)
    out = quadsplit.draw_nodes(img, nodes, color=(0, 0, 255))

    assert out[8, 3].tolist() == [0, 0, 255]
    assert out[3, 3].tolist() == [0, 0, 0]
