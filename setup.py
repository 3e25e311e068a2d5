import setuptools

with open('README.md', encoding='utf8') as infile:
    long_description = infile.read()

with open('VERSION') as infile:
    version = infile.read().strip()

setuptools.setup(
    name='voteledger',
    version=version,
    description='Ledger of votes cast by distinct voters for fixed candidates',
    long_description=long_description,
    long_description_content_type='text/markdown; charset=UTF-8',
    python_requires='>=3.7.0',
    packages=setuptools.find_packages(exclude=('tests', 'tests.*')),
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    include_package_data=True,
    license='MIT',
    keywords='voting vote ledger tally election python',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    zip_safe=True
)
