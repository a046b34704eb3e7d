#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/depth_sort.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""Back-to-front ordering of renderables for painter-style overdraw."""


def depth_sort(entities, camera):
    """
    Reorder entities in place, farthest from the camera first.

    Each entity's distance is evaluated once per pass.  The sort is not
    stable; entities at equal distance end up in no particular order.
    """
    keys = [entity.distance_to_camera(camera) for entity in entities]
    _quicksort(entities, keys, 0, len(entities) - 1)
    return entities


def _quicksort(items, keys, low, high):
    while high - low > 1:
        pivot = keys[(low + high) // 2]
        i, j = low, high
        while i <= j:
            while keys[i] > pivot:
                i += 1
            while keys[j] < pivot:
                j -= 1
            if i <= j:
                _swap(items, keys, i, j)
                i += 1
                j -= 1
        # Recurse into the smaller side, iterate over the larger one
        if j - low < high - i:
            _quicksort(items, keys, low, j)
            low = i
        else:
            _quicksort(items, keys, i, high)
            high = j

    if high - low == 1 and keys[low] < keys[high]:
        _swap(items, keys, low, high)


def _swap(items, keys, i, j):
    items[i], items[j] = items[j], items[i]
    keys[i], keys[j] = keys[j], keys[i]
