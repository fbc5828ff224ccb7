from layermap.singleton import SingletonMeta


class Nothing(metaclass=SingletonMeta):
	'''
	'nothing' is an alternative None. Using nothing allows None to be stored as a valid
	value, distinguishable from 'key not found' or 'not applicable' status.
	'''
	@classmethod
	def instance(cls):
		return cls()

	def __eq__(self, other):
		return type(other) == Nothing

	def __hash__(self):
		return hash(Nothing)

	def __bool__(self):
		return False

	def __repr__(self):
		return 'nothing'

	def __copy__(self):
		return self

	def __deepcopy__(self, memo):
		return self


nothing = Nothing.instance()


def is_nothing(obj):
	return obj is nothing


def is_something(obj):
	return obj is not nothing
