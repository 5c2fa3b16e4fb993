"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='cairn-lang',
	version='0.1.0',
	packages=['cairn', "cairn.tree_walker", ],
	license='MIT',
	description='The evaluation core of a tiny block-oriented scripting language, with closures by snapshot over a dynamic scope stack',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Interpreters",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		"test": ["pytest"],
	},
)
