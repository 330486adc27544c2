"""Place for e-mail provider support; it holds no modules yet."""