"""Revenue reports over recent vouchers"""
