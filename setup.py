#!/usr/bin/env python

if __name__ == '__main__':
    import setuptools

    with open('README.rst', encoding='utf-8') as readme_file:
        long_description = readme_file.read()

    setuptools.setup(
        name='array2d',
        version='0.1.0',
        description='Dense two-dimensional arrays over flat row-major or column-major buffers',
        long_description=long_description,
        long_description_content_type='text/x-rst',
        author='Andrea Zoppi',
        license='BSD 2-Clause License',
        classifiers=[
            'License :: OSI Approved :: BSD License',
            'Operating System :: OS Independent',
            'Programming Language :: Python :: 3',
            'Programming Language :: Python :: 3 :: Only',
            'Topic :: Software Development :: Libraries',
        ],
        package_dir={'': 'src'},
        packages=setuptools.find_packages('src'),
        python_requires='>=3.7',
        extras_require={
            'testing': [
                'pytest',
                'numpy',
            ],
        },
    )
