from collections.abc import Mapping, Sequence


def is_sequence(obj):
	"""
	Check if the object is a sequence but not a string, bytes, or bytearray.

	Args:
	obj (object): The object to be checked.

	Returns:
	bool: True if the object is a sequence but not a string, bytes, or bytearray. False otherwise.
	"""
	return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


def is_mapping(obj):
	return isinstance(obj, Mapping)


def is_writable_mapping(obj):
	"""
	A mapping that supports item assignment: any MutableMapping, but also a LayeredMap, which is
	a read-only Mapping by protocol and writes through __setitem__ to its own layer 0.
	"""
	return is_mapping(obj) and callable(getattr(type(obj), '__setitem__', None))


def checked_layer(obj):
	"""
	Return obj if it can serve as a layer, raise TypeError otherwise.
	Any layer may end up at index 0 of a derived map, so read-only mappings are rejected.
	"""
	if not is_mapping(obj):
		raise TypeError(f"layer must be a mapping, got {type(obj).__name__}")
	if not is_writable_mapping(obj):
		raise TypeError(f"layer must support item assignment, got read-only {type(obj).__name__}")
	return obj


def checked_layers(obj):
	"""
	Return the layer sequence as a new list of mappings.

	The layers themselves are kept, the sequence is always copied: reordering or extending the
	caller's list does not change the map built from it.
	A single mapping is rejected: it is a common mistake for a one-element sequence of layers.

	Raises:
	TypeError: if obj is not a sequence, or one of its elements is not a writable mapping.
	"""
	if not is_sequence(obj):
		raise TypeError(f"layers must be a sequence of mappings, got {type(obj).__name__}")
	return [checked_layer(layer) for layer in obj]
