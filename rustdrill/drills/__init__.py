"""Solutions to the drills on basics, models, collections, errors, iterators and traits."""