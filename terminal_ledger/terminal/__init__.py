"""Terminal identity: name, city, area and contact number"""
