import setuptools

setuptools.setup(
	name='cfg-tables',
	version='0.1.0',
	packages=[
		'cfgtables',
		'cfgtables.parsing',
		'cfgtables.support',
	],
	description='Classify context-free grammars as LL(1) and/or SLR(1), and recognize sentences with the resulting tables',
	long_description=open('README.md', encoding='utf-8').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
	],
)
