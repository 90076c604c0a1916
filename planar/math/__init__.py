'''Math package

Vectors, quaternions and matrices are the building blocks of `Plane`.
'''
