from geometry import cartesian_objects, math_helpers

Pose2d = cartesian_objects.Pose2d
Twist2d = cartesian_objects.Twist2d

sign = math_helpers.sign
clip = math_helpers.clip
lerp = math_helpers.lerp
is_finite = math_helpers.is_finite
wrap_radians = math_helpers.wrap_radians
sinc = math_helpers.sinc
