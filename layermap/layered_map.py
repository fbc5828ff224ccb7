import logging
from collections.abc import Mapping

from layermap.default import default_or_raise
from layermap.nothing import nothing
from layermap.type_check import checked_layer, checked_layers


logger = logging.getLogger(__name__)


def _copy_layer(layer):
    # nested LayeredMaps (and dicts) know how to copy themselves; other mappings become dicts
    copy = getattr(layer, 'copy', None)
    return copy() if callable(copy) else dict(layer)


class LayeredMap(Mapping):
    """A mapping view over an ordered chain of mappings (layers).

    Keys are resolved by looking into each layer in order, starting with the most-specific layer
    at index 0; the first layer holding the key wins. Writes always go to layer 0.
    Misses are reported with 'nothing' instead of None, so None stays a valid value.

    Attributes:
        layers (list of Mapping): The layers, most-specific first. The map owns this list; the
            layer mappings in it are the caller's own, not copies.
    """

    def __init__(self, layers=None):
        """
        Initialize the LayeredMap from an ordered sequence of layers.

        Args:
            layers (sequence of Mapping, optional): The layers, most-specific first.
                Defaults to no layers at all.

        Raises:
            TypeError: If layers is not a sequence, or contains something that is not a mapping
                supporting item assignment.
        """
        self.layers = checked_layers(layers) if layers is not None else []

    @classmethod
    def empty(cls):
        """Create a LayeredMap without any layer."""
        return cls([])

    def get(self, key, default=nothing):
        """
        Look up a key in the layers, in order of priority.

        Args:
            key: The key to look up.
            default: Returned if no layer holds the key. If it is an exception instance,
                it is raised instead. Defaults to nothing.

        Returns:
            The value from the lowest-index layer holding the key, or default.
        """
        for layer in self.layers:
            if key in layer:
                return layer[key]
        return default_or_raise(default, message='key not found in any layer')

    def __getitem__(self, key):
        for layer in self.layers:
            if key in layer:
                return layer[key]
        raise KeyError(key)

    def __contains__(self, key):
        return any(key in layer for layer in self.layers)

    def __len__(self):
        return len(self.to_map())

    def __iter__(self):
        return iter(self.to_map())

    def insert(self, key, value):
        """
        Set a key in layer 0. Lower layers are never touched.

        Args:
            key: The key to set.
            value: The value to associate with the key.

        Returns:
            The value layer 0 held for the key before, or nothing.
            Without any layer the value is dropped and nothing is returned.
        """
        if not self.layers:
            logger.debug("insert(%r) on a LayeredMap without layers: value dropped", key)
            return nothing

        current = self.layers[0]
        previous = current.get(key, nothing)
        current[key] = value
        return previous

    def __setitem__(self, key, value):
        self.insert(key, value)

    def add_map(self, layer):
        """
        Append a layer at the least-specific end.

        Args:
            layer (Mapping): The layer to add. It is not merged with, or checked against, existing layers.

        Raises:
            TypeError: If layer is not a mapping supporting item assignment.

        Returns:
            LayeredMap: self, to allow chained calls.
        """
        self.layers.append(checked_layer(layer))
        return self

    def parents(self):
        """
        Derive a LayeredMap without the least-specific layer.

        Returns:
            LayeredMap: A new map holding copies of all but the last layer, or nothing if there are no layers.
        """
        if not self.layers:
            logger.debug("parents() of a LayeredMap without layers")
            return nothing
        return self._derive(self.layers[:-1])

    def children(self):
        """
        Derive a LayeredMap without the most-specific layer.

        Returns:
            LayeredMap: A new map holding copies of all but the first layer, or nothing if there are no layers.
        """
        if not self.layers:
            logger.debug("children() of a LayeredMap without layers")
            return nothing
        return self._derive(self.layers[1:])

    def _derive(self, layers):
        return self.__class__([_copy_layer(layer) for layer in layers])

    def copy(self):
        """Return a new LayeredMap holding copies of all layers."""
        return self._derive(self.layers)

    __copy__ = copy

    def to_map(self):
        """
        Flatten all layers into a single dict.

        Layers are applied from least- to most-specific, so the most-specific value of each key wins.

        Returns:
            dict: The merged layers.
        """
        merged = {}
        for layer in reversed(self.layers):
            merged.update(layer)
        return merged

    def is_empty(self):
        """True if no layer holds any key. A map without layers is empty as well."""
        return all(len(layer) == 0 for layer in self.layers)

    def __bool__(self):
        return not self.is_empty()

    def enumerate_layers(self):
        """
        Return an enumeration of the layers.

        Returns:
            list of tuple: (index, layer) pairs, most-specific first.
        """
        return list(enumerate(self.layers))

    def __repr__(self):
        return f"{self.__class__.__name__}({self.layers!r})"


# Example usage:
if __name__ == "__main__":
    toys = {"Blocks": 30, "Monopoly": 20}
    computers = {"iMac": 1000, "Chromebook": 800, "PC": 400}
    clothing = {"Jeans": 40, "T-Shirt": 10}

    inventory = LayeredMap([toys, computers, clothing])

    print(inventory.get("Monopoly"))  # Output: 20
    print(inventory.get("Mario Bros."))  # Output: nothing
    print(inventory.get("Chromebook"))  # Output: 800
    print(inventory.get("Jeans"))  # Output: 40

    inventory.insert("Monopoly", 25)  # Goes to toys
    print(toys["Monopoly"])  # Output: 25

    print(inventory.parents())  # Output: copies of toys and computers, without clothing
    print(inventory.to_map())
