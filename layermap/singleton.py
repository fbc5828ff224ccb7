class SingletonMeta(type):
	"""
	Metaclass for classes with exactly one instance: every call of the class returns the
	instance created by the first call.
	"""
	_instances = {}

	def __call__(cls, *args, **kwargs):
		if cls not in cls._instances:
			cls._instances[cls] = super().__call__(*args, **kwargs)
		return cls._instances[cls]
