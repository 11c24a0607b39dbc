import luaubc.common.bytecode as bc


def test_version_bounds():
    assert bc.VERSION_RANGE == (3, 6)
    assert bc.TYPE_VERSION_RANGE == (1, 3)
    assert bc.version_supported(6)
    assert not bc.version_supported(2)
    assert not bc.type_version_supported(4)


def test_wire_values():
    assert bc.LBC_CONSTANT_VECTOR == 7
    assert bc.LBC_TYPE_OPTIONAL_BIT == 128
    assert bc.LBC_TYPE_TAGGED_USERDATA_END == 96
    assert bc.LCT_UPVAL == 2
    assert bc.LPF_NATIVE_FUNCTION == 4


def test_proto_flag_names():
    assert bc.proto_flag_names(0) == []
    assert bc.proto_flag_names(bc.LPF_NATIVE_MODULE | bc.LPF_NATIVE_FUNCTION) == [
        'NATIVE_MODULE', 'NATIVE_FUNCTION'
    ]
