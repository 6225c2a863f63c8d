"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='symget',
	version='0.1.0',
	packages=['symget', "symget.adapters", ],
	entry_points={
		'console_scripts': ["symget = symget.cmdline:main"],
	},
	license='MIT',
	description='Read a hierarchical namespace registry by name: variables, collections, callables, and constants',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.10",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Libraries",
		"Topic :: Software Development :: Debuggers",
		"Environment :: Console",
	],
	python_requires='>=3.10',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
