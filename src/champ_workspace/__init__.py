"""champ-workspace — repository hygiene for a ROS 2 workspace that vendors CHAMP."""

__version__ = "0.1.0"
