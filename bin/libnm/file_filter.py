#!/usr/bin/env python3

import os
from tempfile import NamedTemporaryFile
from abc import ABC, abstractmethod

class FileFilter(ABC):
	"""
	An abstract class that filters the content of a file. It works by passing an
	input and output stream to an abstract function. If the abstract function
	returns true, the content of the output stream replaces the content of the
	original file.
	"""
	def __init__(self, filename, makefile=False):
		self.filename = filename
		if makefile:
			if not os.path.exists(filename):
				with open(filename, 'w+'):
					pass

	@abstractmethod
	def filter_stream(self, in_stream, out_stream):
		pass

	def run(self):
		dirpath = os.path.dirname(self.filename)
		change = False
		if dirpath and not os.path.exists(dirpath):
			os.makedirs(dirpath)
		if not os.path.exists(self.filename):
			with open(self.filename, 'w+'):
				pass
		with open(self.filename) as source, NamedTemporaryFile('w', dir=dirpath or None, delete=False) as outfile:
			change = self.filter_stream(source, outfile)
		if change != False:
			with open(outfile.name) as inflow, open(self.filename, 'w+') as outflow:
				for line in inflow:
					outflow.write(line)
		os.remove(outfile.name)
		return change != False
