
def test_compile():
    # Optional dependencies (pyproj, geographiclib) may only be imported lazily, so every
    # module must import cleanly without them
    import geodatum
    import geodatum.catalog
    import geodatum.conversion
    import geodatum.coordinates
    import geodatum.datums
    import geodatum.ellipsoids
    import geodatum.geodesic
    import geodatum.heights
    import geodatum.helmert
    import geodatum.molodensky
    import geodatum.pipeline
    import geodatum.projection
    import geodatum.strategies

    assert geodatum.__version__
