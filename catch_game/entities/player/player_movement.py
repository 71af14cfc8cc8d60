"""
player_movement.py
------------------
Handles all player movement, acceleration, jumping and screen-boundary logic.

Responsibilities
----------------
- Translate input direction into horizontal acceleration.
- Drive the vertical jump phases (grounded -> rising -> falling -> grounded).
- Integrate velocity with exponential damping, rest snapping and clamping.
- Clamp player position to the visible canvas area.

Units: dt in milliseconds, velocity in px/ms, acceleration in px/ms².
"""

from catch_game.entities.entity_logic import calc_axis_position, clamp_axis
from catch_game.entities.primitives import JumpPhase


def calc_axis_velocity(current_velocity: float, acceleration: float,
                       deceleration_modifier: float, max_speed: float,
                       dt: float) -> float:
    """
    Compute the next velocity along a single axis.

    Args:
        current_velocity: Velocity at the start of the frame
        acceleration: Acceleration applied this frame
        deceleration_modifier: Damping factor (>= 0); also the rest threshold
        max_speed: Speed limit for the axis (>= 0)
        dt: Elapsed milliseconds

    Returns:
        float: Velocity within [-max_speed, max_speed]
    """
    velocity = current_velocity + dt * acceleration
    velocity *= 1 - dt * deceleration_modifier

    # Snap residual drift to rest
    if 0 < velocity < deceleration_modifier or -deceleration_modifier < velocity < 0:
        velocity = 0.0

    return clamp_axis(velocity, -max_speed, max_speed)


def input_acceleration(player) -> float:
    """Horizontal acceleration from input flags. Right wins over left."""
    acceleration = 0.0
    if player.input_direction.left:
        acceleration = -player.acceleration_modifier.x
    if player.input_direction.right:
        acceleration = player.acceleration_modifier.x
    return acceleration


def ground_line(player, canvas_height: float) -> float:
    """Vertical resting position of the player's center."""
    return canvas_height - player.sprite.center_point.y


def update_jump(player, canvas_height: float) -> float:
    """
    Advance the jump phase and return the vertical acceleration for this frame.

    Args:
        player (Player): The player instance being updated.
        canvas_height (float): Current canvas height.
    """
    if player.is_jumping and player.jump_phase != JumpPhase.FALLING:
        player.jump_phase = JumpPhase.RISING

    if player.jump_phase == JumpPhase.RISING:
        if player.velocity.y > -player.max_speed.y:
            return -player.acceleration_modifier.y
        player.jump_phase = JumpPhase.FALLING

    elif player.jump_phase == JumpPhase.FALLING:
        if player.pos.y < ground_line(player, canvas_height):
            return player.deceleration_modifier.y
        player.jump_phase = JumpPhase.GROUNDED

    return 0.0


def update_trajectory(player, dt: float, canvas_height: float):
    """
    Update acceleration, velocity and jump phase of the player.

    Args:
        player (Player): The player instance being updated.
        dt (float): Delta time since the last frame (in milliseconds).
        canvas_height (float): Current canvas height.
    """
    player.acceleration.x = input_acceleration(player)
    player.acceleration.y = update_jump(player, canvas_height)

    player.velocity.x = calc_axis_velocity(
        player.velocity.x,
        player.acceleration.x,
        player.deceleration_modifier.x,
        player.max_speed.x,
        dt,
    )
    player.velocity.y = calc_axis_velocity(
        player.velocity.y,
        player.acceleration.y,
        player.deceleration_modifier.y,
        player.max_speed.y,
        dt,
    )


def update_position(player, dt: float, canvas_width: float, canvas_height: float):
    """Integrate position and constrain it within canvas bounds."""
    player.pos.x = calc_axis_position(player.pos.x, player.velocity.x, dt)
    player.pos.y = calc_axis_position(player.pos.y, player.velocity.y, dt)
    clamp_to_canvas(player, canvas_width, canvas_height)


def clamp_to_canvas(player, canvas_width: float, canvas_height: float):
    center = player.sprite.center_point
    player.pos.x = clamp_axis(player.pos.x, center.x, canvas_width - center.x)
    player.pos.y = clamp_axis(player.pos.y, center.y, canvas_height - center.y)
